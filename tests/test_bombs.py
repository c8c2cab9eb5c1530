"""Tests for placing and detonating bombs."""

import pytest

from dot4gravity.config import BOMB_AMOUNT_PER_PLAYER, BOMB_ENERGY_PER_PLAYER
from dot4gravity.errors import (
    GameAlreadyFinishedError,
    InsufficientBombEnergyError,
    InvalidBombCoordinatesError,
    NoMoreBombsAvailableError,
    NotPlayerTurnError,
)
from dot4gravity.game_engine import GameEngine
from dot4gravity.models import Cell, Coordinates, PowerLevel
from dot4gravity.rules.detonation import blast_area
from tests.helpers import ALICE, BOB, CHARLIE, EMPTY_ROWS, make_board

SALT = (3453).to_bytes(32, "little")
OTHER_SALT = (1241).to_bytes(32, "little")
CENTER = Coordinates(row=4, col=4)

# Stones of player 1 around (4, 4) with a block on one diagonal.
CROWDED_ROWS = [
    "..........",
    "..........",
    "..........",
    "...111....",
    "...111....",
    "...11#....",
    "..........",
    "..........",
    "..........",
    "..........",
]


def _with_alice_bomb(state, coordinates=CENTER, salt=SALT):
    """Place a bomb for Alice and hand the turn back to her."""
    state = GameEngine.place_bomb(state, ALICE, coordinates, salt)
    return state.model_copy(update={"next_player": ALICE})


class TestPlaceBomb:

    def test_place_bomb_stores_commitment_and_passes_turn(self, new_game):
        state = GameEngine.place_bomb(new_game, ALICE, CENTER, SALT)
        assert len(state.pending_bombs_for(ALICE)) == 1
        assert state.pending_bombs_for(BOB) == []
        assert state.next_player == BOB
        # Bomb moves are not recorded as last move.
        assert state.last_move is None
        # The raw coordinate is never stored.
        assert "4,4" not in state.model_dump_json()

    def test_cannot_place_more_bombs_than_the_limit(self, new_game):
        state = new_game
        for col in range(BOMB_AMOUNT_PER_PLAYER):
            state = _with_alice_bomb(state, Coordinates(row=0, col=col))
            assert len(state.pending_bombs_for(ALICE)) == col + 1

        with pytest.raises(NoMoreBombsAvailableError):
            GameEngine.place_bomb(state, ALICE, Coordinates(row=0, col=9), SALT)
        assert len(state.pending_bombs_for(ALICE)) == BOMB_AMOUNT_PER_PLAYER

    def test_cannot_place_a_bomb_in_the_same_coordinates(self, new_game):
        state = _with_alice_bomb(new_game, Coordinates(row=0, col=0))
        with pytest.raises(InvalidBombCoordinatesError):
            GameEngine.place_bomb(state, ALICE, Coordinates(row=0, col=0), SALT)

    def test_same_coordinates_with_other_salt_is_a_new_bomb(self, new_game):
        state = _with_alice_bomb(new_game, Coordinates(row=0, col=0))
        state = GameEngine.place_bomb(state, ALICE, Coordinates(row=0, col=0), OTHER_SALT)
        assert len(state.pending_bombs_for(ALICE)) == 2

    def test_cannot_place_out_of_turn(self, new_game):
        with pytest.raises(NotPlayerTurnError):
            GameEngine.place_bomb(new_game, BOB, CENTER, SALT)
        assert new_game.pending_bombs_for(BOB) == []

    def test_cannot_place_when_finished(self, new_game):
        state = new_game.model_copy(update={"winner": BOB})
        with pytest.raises(GameAlreadyFinishedError):
            GameEngine.place_bomb(state, ALICE, CENTER, SALT)

    def test_finished_check_precedes_bomb_limit(self, new_game):
        state = new_game
        for col in range(BOMB_AMOUNT_PER_PLAYER):
            state = _with_alice_bomb(state, Coordinates(row=1, col=col))
        state = state.model_copy(update={"winner": BOB})
        with pytest.raises(GameAlreadyFinishedError):
            GameEngine.place_bomb(state, ALICE, CENTER, SALT)

    def test_bomb_can_target_a_block(self, state_factory):
        state = state_factory(["#" + "." * 9] + EMPTY_ROWS[1:])
        state = _with_alice_bomb(state, Coordinates(row=0, col=0))
        state = GameEngine.detonate_bomb(
            state, ALICE, Coordinates(row=0, col=0), SALT, PowerLevel.ONE
        )
        assert state.board.get_cell(Coordinates(row=0, col=0)) == Cell.block()


class TestDetonateBomb:

    def test_wrong_salt_is_rejected(self, new_game):
        state = _with_alice_bomb(new_game, Coordinates(row=0, col=0))
        with pytest.raises(InvalidBombCoordinatesError):
            GameEngine.detonate_bomb(
                state, ALICE, Coordinates(row=0, col=0), OTHER_SALT, PowerLevel.ONE
            )

    def test_wrong_coordinates_are_rejected(self, new_game):
        state = _with_alice_bomb(new_game, Coordinates(row=0, col=0))
        with pytest.raises(InvalidBombCoordinatesError):
            GameEngine.detonate_bomb(
                state, ALICE, Coordinates(row=0, col=1), SALT, PowerLevel.ONE
            )

    def test_opponent_cannot_detonate_foreign_bomb(self, new_game):
        state = GameEngine.place_bomb(new_game, ALICE, CENTER, SALT)
        with pytest.raises(InvalidBombCoordinatesError):
            GameEngine.detonate_bomb(state, BOB, CENTER, SALT, PowerLevel.ONE)

    def test_outsider_gets_invalid_coordinates(self, new_game):
        with pytest.raises(InvalidBombCoordinatesError):
            GameEngine.detonate_bomb(new_game, CHARLIE, CENTER, SALT, PowerLevel.ONE)

    def test_commitment_check_precedes_finished_check(self, new_game):
        state = _with_alice_bomb(new_game).model_copy(update={"winner": BOB})
        with pytest.raises(InvalidBombCoordinatesError):
            GameEngine.detonate_bomb(state, ALICE, CENTER, OTHER_SALT, PowerLevel.ONE)
        with pytest.raises(GameAlreadyFinishedError):
            GameEngine.detonate_bomb(state, ALICE, CENTER, SALT, PowerLevel.ONE)

    def test_cannot_detonate_out_of_turn(self, new_game):
        state = GameEngine.place_bomb(new_game, ALICE, CENTER, SALT)
        with pytest.raises(NotPlayerTurnError):
            GameEngine.detonate_bomb(state, ALICE, CENTER, SALT, PowerLevel.ONE)

    def test_insufficient_energy(self, new_game):
        state = _with_alice_bomb(new_game).model_copy(
            update={"bomb_energy": [2, BOMB_ENERGY_PER_PLAYER]}
        )
        with pytest.raises(InsufficientBombEnergyError):
            GameEngine.detonate_bomb(state, ALICE, CENTER, SALT, PowerLevel.THREE)
        # A cheaper level still works.
        state = GameEngine.detonate_bomb(state, ALICE, CENTER, SALT, PowerLevel.TWO)
        assert state.get_bomb_energy_for(ALICE) == 0

    @pytest.mark.parametrize("level", list(PowerLevel))
    def test_energy_is_deducted_by_level(self, new_game, level):
        state = _with_alice_bomb(new_game)
        state = GameEngine.detonate_bomb(state, ALICE, CENTER, SALT, level)
        assert state.get_bomb_energy_for(ALICE) == BOMB_ENERGY_PER_PLAYER - level.value
        assert state.get_bomb_energy_for(BOB) == BOMB_ENERGY_PER_PLAYER

    def test_detonation_removes_only_that_commitment(self, new_game):
        state = _with_alice_bomb(new_game, Coordinates(row=0, col=0))
        state = _with_alice_bomb(state, CENTER)
        state = GameEngine.detonate_bomb(state, ALICE, CENTER, SALT, PowerLevel.ONE)
        assert len(state.pending_bombs_for(ALICE)) == 1
        assert state.next_player == BOB
        with pytest.raises(InvalidBombCoordinatesError):
            GameEngine.detonate_bomb(
                state.model_copy(update={"next_player": ALICE}),
                ALICE,
                CENTER,
                SALT,
                PowerLevel.ONE,
            )

    def test_energy_never_goes_negative(self, new_game):
        state = new_game
        levels = [PowerLevel.THREE, PowerLevel.TWO, PowerLevel.ONE]
        for col, level in enumerate(levels):
            target = Coordinates(row=9, col=col)
            state = _with_alice_bomb(state, target)
            if level.can_use_level(state.get_bomb_energy_for(ALICE)):
                state = GameEngine.detonate_bomb(state, ALICE, target, SALT, level)
                state = state.model_copy(update={"next_player": ALICE})
            else:
                with pytest.raises(InsufficientBombEnergyError):
                    GameEngine.detonate_bomb(state, ALICE, target, SALT, level)
        assert state.get_bomb_energy_for(ALICE) == 0


class TestBlastArea:

    def _detonate(self, state_factory, level):
        state = _with_alice_bomb(state_factory(CROWDED_ROWS))
        return GameEngine.detonate_bomb(state, ALICE, CENTER, SALT, level)

    def test_level_one_clears_epicenter_only(self, state_factory):
        state = self._detonate(state_factory, PowerLevel.ONE)
        assert state.board == make_board([
            "..........",
            "..........",
            "..........",
            "...111....",
            "...1.1....",
            "...11#....",
            *EMPTY_ROWS[6:],
        ])

    def test_level_two_adds_orthogonal_neighbours(self, state_factory):
        state = self._detonate(state_factory, PowerLevel.TWO)
        assert state.board == make_board([
            "..........",
            "..........",
            "..........",
            "...1.1....",
            "..........",
            "...1.#....",
            *EMPTY_ROWS[6:],
        ])

    def test_level_three_adds_diagonals_but_keeps_blocks(self, state_factory):
        state = self._detonate(state_factory, PowerLevel.THREE)
        assert state.board == make_board([
            "..........",
            "..........",
            "..........",
            "..........",
            "..........",
            ".....#....",
            *EMPTY_ROWS[6:],
        ])

    def test_detonation_does_not_touch_input_state(self, state_factory):
        before = _with_alice_bomb(state_factory(CROWDED_ROWS))
        snapshot = before.model_dump()
        GameEngine.detonate_bomb(before, ALICE, CENTER, SALT, PowerLevel.THREE)
        assert before.model_dump() == snapshot

    def test_blast_at_corner_stays_on_board(self, state_factory):
        corner = Coordinates(row=9, col=9)
        rows = EMPTY_ROWS[:8] + ["........11", "........11"]
        state = _with_alice_bomb(state_factory(rows), corner)
        state = GameEngine.detonate_bomb(state, ALICE, corner, SALT, PowerLevel.THREE)
        assert state.board == make_board(EMPTY_ROWS)

    @pytest.mark.parametrize(
        "level,size", [(PowerLevel.ONE, 1), (PowerLevel.TWO, 5), (PowerLevel.THREE, 9)]
    )
    def test_blast_area_size(self, level, size):
        assert len(blast_area(CENTER, level)) == size
        assert blast_area(CENTER, level)[0] == CENTER
