"""Tests for the command line entry point."""

import json

import pytest

from tradedesk.__main__ import build_demo_proposal, main
from tradedesk.config import set_settings
from tradedesk.core.rng import SeededRNG
from tradedesk.core.trades.validation import validate_trade_proposal
from tradedesk.generators.league import generate_league


@pytest.fixture(autouse=True)
def reset_settings():
    set_settings(None)
    yield
    set_settings(None)


class TestDemo:

    def test_demo_proposal_is_valid(self):
        rng = SeededRNG(3)
        league = generate_league(rng, num_clubs=6)
        proposal = build_demo_proposal(league, rng)

        assert validate_trade_proposal(proposal, league.players, league.clubs).valid
        assert len(proposal.picks_offered) == 1

    def test_demo_runs(self, capsys):
        assert main(["--demo", "--seed", "7"]) == 0

        out = capsys.readouterr().out
        assert "Demo Mode" in out
        assert "Round 1:" in out

    def test_demo_json(self, capsys):
        assert main(["--demo", "--seed", "7", "--json", "--rounds", "1"]) == 0

        out = capsys.readouterr().out
        assert '"status"' in out


class TestFileInput:

    def _write_inputs(self, tmp_path, players, clubs, proposal_data, club_overrides=None):
        club_dicts = [c.to_dict() for c in clubs.values()]
        if club_overrides:
            club_dicts[0]["ai_personality"].update(club_overrides)
        league = {
            "current_year": 2025,
            "players": [p.to_dict() for p in players.values()],
            "clubs": club_dicts,
        }
        league_file = tmp_path / "league.json"
        league_file.write_text(json.dumps(league))
        proposal_file = tmp_path / "proposal.json"
        proposal_file.write_text(json.dumps(proposal_data))
        return str(league_file), str(proposal_file)

    def test_negotiates_from_files(self, tmp_path, players, clubs, capsys):
        league_file, proposal_file = self._write_inputs(tmp_path, players, clubs, {
            "id": "trade_file",
            "proposing_club_id": "a",
            "receiving_club_id": "b",
            "players_offered": ["a-star"],
            "players_requested": ["b-im-0"],
        })

        assert main(["--league", league_file, "--proposal", proposal_file]) == 0
        assert "Round 1: a -> b" in capsys.readouterr().out

    def test_invalid_proposal(self, tmp_path, players, clubs, capsys):
        league_file, proposal_file = self._write_inputs(tmp_path, players, clubs, {
            "id": "trade_file",
            "proposing_club_id": "a",
            "receiving_club_id": "b",
            "players_offered": ["b-star"],
        })

        assert main(["--league", league_file, "--proposal", proposal_file]) == 1
        assert "Proposal is invalid" in capsys.readouterr().out

    def test_unknown_personality_value(self, tmp_path, players, clubs, caplog):
        league_file, proposal_file = self._write_inputs(tmp_path, players, clubs, {
            "id": "trade_file",
            "proposing_club_id": "a",
            "receiving_club_id": "b",
            "players_offered": ["a-star"],
            "players_requested": ["b-im-0"],
        }, club_overrides={"competitive_window": "tanking"})

        assert main(["--league", league_file, "--proposal", proposal_file]) == 2
        assert "Could not load input" in caplog.text

    def test_unknown_proposal_status(self, tmp_path, players, clubs):
        league_file, proposal_file = self._write_inputs(tmp_path, players, clubs, {
            "id": "trade_file",
            "proposing_club_id": "a",
            "receiving_club_id": "b",
            "players_offered": ["a-star"],
            "players_requested": ["b-im-0"],
            "status": "done",
        })

        assert main(["--league", league_file, "--proposal", proposal_file]) == 2

    def test_unreadable_input(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")

        assert main(["--league", str(bad), "--proposal", str(bad)]) == 2


class TestArguments:

    def test_requires_mode(self):
        with pytest.raises(SystemExit):
            main([])

    def test_rounds_must_be_positive(self):
        with pytest.raises(SystemExit):
            main(["--demo", "--rounds", "0"])
