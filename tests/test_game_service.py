import random

from word_scramble.models import RejectionReason
from word_scramble.services import GameService, WordSetOracle


def test_create_new_game(service):
    game_id = service.create_new_game()
    state = service.get_game_state(game_id)
    assert state.root_word == "silkworm"
    assert state.used_words == []
    assert state.score == 0


def test_add_word_accepts_normalized_word(service):
    game_id = service.create_new_game()
    result = service.add_word(game_id, "  SILK \n")
    assert result.accepted is True
    assert result.word == "silk"
    assert result.ignored is False

    state = service.get_game_state(game_id)
    assert state.used_words == ["silk"]
    assert state.score == 4


def test_rejected_word_leaves_state_untouched(service):
    game_id = service.create_new_game()
    service.add_word(game_id, "silk")

    for candidate, reason in [
        ("Silk", RejectionReason.ALREADY_USED),
        ("xlk", RejectionReason.NOT_POSSIBLE),
        ("klis", RejectionReason.NOT_REAL),
        ("so", RejectionReason.TOO_SHORT),
        ("SILKWORM", RejectionReason.IS_ROOT_WORD),
    ]:
        result = service.add_word(game_id, candidate)
        assert result.accepted is False
        assert result.reason is reason

    assert service.get_game_state(game_id).used_words == ["silk"]


def test_empty_submission_is_ignored(service):
    game_id = service.create_new_game()
    result = service.add_word(game_id, "   ")
    assert result.ignored is True
    assert result.reason is None
    assert service.get_game_state(game_id).used_words == []


def test_score_tracks_accepted_words(service):
    game_id = service.create_new_game()
    for word in ["silk", "worm", "milk", "swirl", "owl"]:
        assert service.add_word(game_id, word).accepted

    state = service.get_game_state(game_id)
    assert state.used_words == ["owl", "swirl", "milk", "worm", "silk"]
    assert state.score == 20


def test_unknown_game(service):
    assert service.get_game_state("missing") is None
    assert service.add_word("missing", "silk") is None
    assert service.restart_game("missing") is None
    assert service.delete_game("missing") is False


def test_restart_game_resets_words(oracle):
    service = GameService(["absolute", "silkworm"], oracle, rng=random.Random(5))
    game_id = service.create_new_game()
    service.games[game_id].root_word = "silkworm"
    service.add_word(game_id, "silk")

    state = service.restart_game(game_id)
    assert state.used_words == []
    assert state.score == 0
    assert state.root_word in {"absolute", "silkworm"}


def test_sessions_are_independent(service):
    first = service.create_new_game()
    second = service.create_new_game()
    service.add_word(first, "silk")

    assert first != second
    assert service.get_game_state(second).used_words == []
    # Same word is still original in the other session
    assert service.add_word(second, "silk").accepted


def test_empty_word_list_uses_default_root_word():
    service = GameService([], WordSetOracle(["silk"]))
    game_id = service.create_new_game()
    assert service.get_game_state(game_id).root_word == "silkworm"


def test_delete_game(service):
    game_id = service.create_new_game()
    assert service.delete_game(game_id) is True
    assert service.get_game_state(game_id) is None
