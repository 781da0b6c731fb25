"""
Integration tests for the standings route.
"""

import pytest

from footix_manager.models import Club, Competition, CompetitionClub, Server


@pytest.fixture
def league(session):
    server = Server(name="League Server")
    session.add(server)
    session.commit()
    session.refresh(server)

    clubs = [Club(server_id=server.id, name=name) for name in ("Alpha", "Bravo", "Charlie", "Delta")]
    for club in clubs:
        session.add(club)
    session.commit()
    for club in clubs:
        session.refresh(club)

    competition = Competition(server_id=server.id, name="Ligue Test", tie_break_order=["goal_difference"])
    session.add(competition)
    session.commit()
    session.refresh(competition)

    alpha, bravo, charlie, delta = clubs
    # Alpha and Bravo tie on points, Alpha has the better goal difference
    counters = [
        CompetitionClub(competition_id=competition.id, club_id=bravo.id, group="A",
                        points=10, goals_for=3, goals_against=1, wins=3, draws=1, losses=0),
        CompetitionClub(competition_id=competition.id, club_id=delta.id, group="B",
                        points=4, goals_for=2, goals_against=6, wins=1, draws=1, losses=2),
        CompetitionClub(competition_id=competition.id, club_id=alpha.id, group="A",
                        points=10, goals_for=5, goals_against=2, wins=3, draws=1, losses=0),
        CompetitionClub(competition_id=competition.id, club_id=charlie.id, group="B",
                        points=12, goals_for=8, goals_against=3, wins=4, draws=0, losses=0),
    ]
    for counter in counters:
        session.add(counter)
    session.commit()

    return {"competition": competition, "clubs": {c.name: c for c in clubs}}


def names(table):
    return [entry["club_name"] for entry in table]


class TestStandingsRoute:
    def test_ranked_table(self, client, league):
        response = client.get(f"/competitions/{league['competition'].id}/standings")

        assert response.status_code == 200
        body = response.json()
        assert body["competition"]["name"] == "Ligue Test"
        assert names(body["standings"]) == ["Charlie", "Alpha", "Bravo", "Delta"]
        assert [e["position"] for e in body["standings"]] == [1, 2, 3, 4]

        alpha = body["standings"][1]
        assert alpha["goal_difference"] == 3
        assert alpha["matches_played"] == 4

    def test_groups(self, client, league):
        body = client.get(f"/competitions/{league['competition'].id}/standings").json()

        assert names(body["groups"]["A"]) == ["Alpha", "Bravo"]
        assert names(body["groups"]["B"]) == ["Charlie", "Delta"]

    def test_group_filter(self, client, league):
        response = client.get(
            f"/competitions/{league['competition'].id}/standings", params={"group": "B"}
        )

        assert names(response.json()["standings"]) == ["Charlie", "Delta"]

    def test_default_tie_break_order(self, client, session, league):
        competition = league["competition"]
        competition.tie_break_order = []
        session.add(competition)
        session.commit()

        body = client.get(f"/competitions/{competition.id}/standings").json()

        # goal_difference still comes first in the default order
        assert names(body["standings"]) == ["Charlie", "Alpha", "Bravo", "Delta"]

    def test_unknown_competition(self, client, league):
        response = client.get("/competitions/999/standings")

        assert response.status_code == 404
        assert response.json()["code"] == "COMPETITION_NOT_FOUND"
