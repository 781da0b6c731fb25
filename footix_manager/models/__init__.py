# footix_manager/models/__init__.py
# Centralized imports for all database models and schemas

# Server
from .server_model import Server

# Player
from .player_model import Player, ContractTerms, PlayerSnapshot, MarketValueRead

# Club
from .club_model import Club, ClubSnapshot, ClubSummary

# Auctions
from .auction_model import (
    Auction, AuctionBid, AuctionStatus, BidRecord, AuctionSnapshot,
    PlaceBidRequest, BidRead, AuctionCountdownRead, AuctionAnalyticsRead, AuctionRead
)

# Competitions and standings
from .competition_model import (
    Competition, CompetitionClub, CompetitionType, StandingRow, CompetitionRead
)

# Loans
from .loan_model import Loan, LoanStatus, LoanRequest, LoanPaymentRequest
