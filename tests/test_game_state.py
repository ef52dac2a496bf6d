import random

from word_scramble.config import DEFAULT_ROOT_WORD
from word_scramble.models import GameState, RejectionReason


def test_start_game_picks_from_the_list():
    words = ["absolute", "abundant", "academic"]
    game = GameState(game_id="g1")
    game.start_game(words, random.Random(3))
    assert game.root_word in words
    assert game.used_words == []


def test_start_game_is_reproducible_with_a_seed():
    words = ["absolute", "abundant", "academic", "accident", "accurate"]
    picks = []
    for _ in range(2):
        game = GameState(game_id="g1")
        game.start_game(words, random.Random(11))
        picks.append(game.root_word)
    assert picks[0] == picks[1]


def test_start_game_falls_back_to_default_word():
    game = GameState(game_id="g1")
    game.start_game([], random.Random(1))
    assert game.root_word == DEFAULT_ROOT_WORD == "silkworm"

    game.start_game(None)
    assert game.root_word == "silkworm"


def test_start_game_clears_used_words():
    game = GameState(game_id="g1", root_word="silkworm", used_words=["silk", "worm"])
    game.start_game(["absolute"])
    assert game.root_word == "absolute"
    assert game.used_words == []
    assert game.score == 0


def test_accept_word_prepends_and_updates_score():
    game = GameState(game_id="g1", root_word="silkworm")
    game.accept_word("silk")
    assert game.used_words == ["silk"]
    assert game.score == 4

    game.accept_word("swirl")
    game.accept_word("owl")
    assert game.used_words == ["owl", "swirl", "silk"]
    assert game.score == sum(len(w) for w in game.used_words) == 12


def test_to_view_is_a_snapshot():
    game = GameState(game_id="g1", root_word="silkworm")
    game.accept_word("silk")
    view = game.to_view()
    game.accept_word("worm")

    assert view.game_id == "g1"
    assert view.root_word == "silkworm"
    assert view.used_words == ["silk"]
    assert view.score == 4


def test_rejection_text_mentions_root_word():
    title, message = RejectionReason.NOT_POSSIBLE.describe("silkworm")
    assert title == "Word not possible"
    assert message == "You can't spell that word from silkworm"


def test_every_reason_has_text():
    for reason in RejectionReason:
        title, message = reason.describe("silkworm")
        assert title and message
