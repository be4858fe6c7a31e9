import re
import string

import pytest

from passwordGenerator import (CapitaliseMode, DegenerateWordError, InvalidConfiguration,
                               MemorablePassword, Wordlist, WordlistMode, capitalise,
                               memorablestyle, numeric_token)
from wordlists import ABSTRACT_WORDS, UK_LOCATIONS, WORLDWIDE_LOCATIONS


def split_password(password):
    m = re.fullmatch(r"(\D+)(\d*)(\D+)", password)
    assert m, f"unexpected shape: {password}"
    return m.group(1) + m.group(3), m.group(2)


def test_splices_number_into_word_at_forced_position(scripted):
    rng = scripted(randint={(0, 999): [725], (1, 3): [2]})
    generator = MemorablePassword(3, CapitaliseMode.NONE, WordlistMode.ABSTRACT_ONLY,
                                  rng=rng, wordlists={Wordlist.ABSTRACT: ('able',)})
    assert generator.generate() == 'ab725le'


@pytest.mark.parametrize("numdigits", [1, 3, 8])
def test_numeric_part_only_uses_digits_two_to_nine(seeded, numdigits):
    generator = MemorablePassword(numdigits, rng=seeded)
    for _ in range(200):
        _word, number = split_password(generator.generate())
        assert len(number) == numdigits
        assert set(number) <= set('23456789')


@pytest.mark.parametrize("numdigits", [0, 1, 3, 8])
def test_length_is_word_plus_digits(seeded, numdigits):
    generator = MemorablePassword(numdigits, rng=seeded,
                                  wordlists={Wordlist.ABSTRACT: ('bridge',)})
    for _ in range(20):
        assert len(generator.generate()) == len('bridge') + numdigits


def test_number_never_at_start_or_end(seeded):
    generator = MemorablePassword(4, CapitaliseMode.SOME, WordlistMode.ALL, rng=seeded)
    for _ in range(300):
        password = generator.generate()
        assert not password[0].isdigit()
        assert not password[-1].isdigit()


def test_two_letter_word_gets_number_in_the_middle(seeded):
    generator = MemorablePassword(2, rng=seeded, wordlists={Wordlist.ABSTRACT: ('ox',)})
    password = generator.generate()
    assert password[0] == 'o' and password[-1] == 'x'
    assert len(password) == 4


def test_capitalise_none_leaves_word_alone(seeded):
    generator = MemorablePassword(3, CapitaliseMode.NONE, rng=seeded)
    for _ in range(100):
        word, _number = split_password(generator.generate())
        assert word in ABSTRACT_WORDS


def test_capitalise_one_uppercases_exactly_one_letter(seeded):
    generator = MemorablePassword(3, CapitaliseMode.ONE, rng=seeded)
    for _ in range(300):
        word, _number = split_password(generator.generate())
        assert sum(c.isupper() for c in word) == 1
        assert word.lower() in ABSTRACT_WORDS


def test_capitalise_one_forced_position(scripted):
    assert capitalise('bath', CapitaliseMode.ONE, scripted(randint={(0, 3): [2]})) == 'baTh'


def test_capitalise_some_forced_draws(scripted):
    rng = scripted(randint={(0, 3): [0, 1, 2, 0]})
    assert capitalise('abcd', CapitaliseMode.SOME, rng) == 'AbcD'


def test_capitalise_some_is_roughly_a_quarter(seeded):
    word = 'a' * 4000
    upper = sum(c.isupper() for c in capitalise(word, CapitaliseMode.SOME, seeded))
    assert 800 < upper < 1200


def test_capitalise_keeps_non_ascii_characters_whole(scripted):
    assert capitalise('ñandú', CapitaliseMode.ONE, scripted(randint={(0, 4): [0]})) == 'Ñandú'


def test_capitalise_rejects_unknown_mode(seeded):
    with pytest.raises(InvalidConfiguration):
        capitalise('word', 'shouty', seeded)


def test_numeric_token_remaps_padding_zeros(scripted):
    rng = scripted(randint={(0, 999): [5], (2, 9): [7, 8]})
    assert numeric_token(3, rng) == '785'


def test_numeric_token_remaps_leading_ones(scripted):
    rng = scripted(randint={(0, 999): [110], (2, 9): [3, 4, 5]})
    assert numeric_token(3, rng) == '345'


def test_numeric_token_zero_digits_is_empty(seeded):
    assert numeric_token(0, seeded) == ''


def test_zero_digits_returns_plain_word(seeded):
    generator = MemorablePassword(0, rng=seeded, wordlists={Wordlist.ABSTRACT: ('river',)})
    assert generator.generate() == 'river'


def test_get_word_respects_character_limit(seeded):
    generator = MemorablePassword(wordlist_mode=WordlistMode.ONLY_UK, rng=seeded,
                                  wordlists={Wordlist.UK: ('Bath', 'London')})
    for _ in range(100):
        assert generator.get_word(character_limit=4) == 'Bath'


def test_get_word_limit_applies_before_capitalising(seeded):
    generator = MemorablePassword(capitalise_mode='one', wordlist_mode='uk_only', rng=seeded,
                                  wordlists={Wordlist.UK: ('Bath', 'London')})
    for _ in range(50):
        assert generator.get_word(4).lower() == 'bath'


def test_get_word_without_limit_draws_from_list(seeded):
    generator = MemorablePassword(wordlist_mode=WordlistMode.ONLY_WORLDWIDE, rng=seeded)
    assert generator.get_word() in WORLDWIDE_LOCATIONS
    assert generator.get_word(0) in WORLDWIDE_LOCATIONS


def test_get_word_falls_back_after_fifty_attempts(scripted):
    rng = scripted()
    word = MemorablePassword(rng=rng).get_word(character_limit=1)
    assert len(word) == 4
    assert set(word) <= set(string.ascii_lowercase)
    #   50 draws from the list plus 4 letters
    assert rng.choice_calls == 54


def test_get_word_rejects_negative_limit(seeded):
    with pytest.raises(InvalidConfiguration):
        MemorablePassword(rng=seeded).get_word(-1)


def test_one_character_word_is_degenerate(seeded):
    generator = MemorablePassword(rng=seeded, wordlists={Wordlist.ABSTRACT: ('a',)})
    with pytest.raises(DegenerateWordError):
        generator.generate()


def test_all_mode_picks_abstract_on_heads(scripted):
    generator = MemorablePassword(wordlist_mode=WordlistMode.ALL,
                                  rng=scripted(randint={(0, 1): [1]}))
    assert generator.resolve_wordlist() is Wordlist.ABSTRACT


def test_all_mode_picks_location_on_tails(scripted):
    generator = MemorablePassword(wordlist_mode=WordlistMode.ALL,
                                  rng=scripted(randint={(0, 1): [0]}, choice=[Wordlist.WORLDWIDE]))
    assert generator.resolve_wordlist() is Wordlist.WORLDWIDE


def test_all_mode_weights_towards_abstract(seeded):
    generator = MemorablePassword(wordlist_mode=WordlistMode.ALL, rng=seeded)
    picks = [generator.resolve_wordlist() for _ in range(2000)]
    assert 850 < picks.count(Wordlist.ABSTRACT) < 1150
    assert picks.count(Wordlist.UK) > 350
    assert picks.count(Wordlist.WORLDWIDE) > 350


@pytest.mark.parametrize("mode", [WordlistMode.ALL_LOCATIONS, WordlistMode.NOT_ABSTRACT])
def test_location_modes_never_pick_abstract(seeded, mode):
    generator = MemorablePassword(wordlist_mode=mode, rng=seeded)
    picks = {generator.resolve_wordlist() for _ in range(200)}
    assert picks == {Wordlist.UK, Wordlist.WORLDWIDE}


@pytest.mark.parametrize("mode, expected", [
    (WordlistMode.ABSTRACT_ONLY, Wordlist.ABSTRACT),
    (WordlistMode.ONLY_UK, Wordlist.UK),
    (WordlistMode.ONLY_WORLDWIDE, Wordlist.WORLDWIDE),
])
def test_fixed_modes(seeded, mode, expected):
    assert MemorablePassword(wordlist_mode=mode, rng=seeded).resolve_wordlist() is expected


def test_modes_accept_string_values():
    generator = MemorablePassword(3, 'some', 'not_abstract')
    assert generator.capitalise_mode is CapitaliseMode.SOME
    assert generator.wordlist_mode is WordlistMode.NOT_ABSTRACT


@pytest.mark.parametrize("kwargs", [
    {'capitalise_mode': 'shouty'},
    {'wordlist_mode': 'mars'},
    {'num_digits': -1},
    {'num_digits': 'three'},
    {'num_digits': True},
])
def test_invalid_configuration_rejected_at_construction(kwargs):
    with pytest.raises(InvalidConfiguration):
        MemorablePassword(**kwargs)


def test_setters_validate():
    generator = MemorablePassword()
    with pytest.raises(InvalidConfiguration):
        generator.set_capitalise_mode('loud')
    with pytest.raises(InvalidConfiguration):
        generator.set_wordlist_mode('moon')
    with pytest.raises(InvalidConfiguration):
        generator.set_num_digits(-2)
    assert generator.capitalise_mode is CapitaliseMode.NONE
    assert generator.wordlist_mode is WordlistMode.ABSTRACT_ONLY
    assert generator.num_digits == 3


def test_overwritten_mode_fails_on_use(seeded):
    generator = MemorablePassword(rng=seeded)
    generator.capitalise_mode = 'loud'
    with pytest.raises(InvalidConfiguration):
        generator.generate()
    generator = MemorablePassword(rng=seeded)
    generator.wordlist_mode = 'moon'
    with pytest.raises(InvalidConfiguration):
        generator.get_word()


def test_setters_affect_next_call(seeded):
    generator = MemorablePassword(wordlist_mode=WordlistMode.ONLY_UK, rng=seeded)
    assert generator.get_word() in UK_LOCATIONS
    generator.set_wordlist_mode(WordlistMode.ONLY_WORLDWIDE)
    generator.set_capitalise_mode(CapitaliseMode.ONE)
    generator.set_num_digits(5)
    word, number = split_password(generator.generate())
    assert len(number) == 5
    assert word.lower() in {w.lower() for w in WORLDWIDE_LOCATIONS}


def test_construction_leaves_global_random_alone():
    import random
    state = random.getstate()
    MemorablePassword()
    assert random.getstate() == state


def test_verbose_logs_to_stderr(seeded, capsys):
    MemorablePassword(rng=seeded, verbose=True).generate()
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'wordlist: ABSTRACT' in captured.err
    assert 'position:' in captured.err


def test_memorablestyle():
    word, number = split_password(memorablestyle(4, 'none', 'abstract_words_only'))
    assert word in ABSTRACT_WORDS
    assert len(number) == 4


def test_demo_prints_every_mode(capsys):
    from passwordGenerator import demo
    demo()
    out = capsys.readouterr().out
    for mode in list(CapitaliseMode) + list(WordlistMode):
        assert f"'{mode.value}'" in out


@pytest.mark.parametrize("words", [ABSTRACT_WORDS, UK_LOCATIONS, WORLDWIDE_LOCATIONS])
def test_builtin_words_are_plain_letters(words):
    assert all(len(w) >= 2 and w.isascii() and w.isalpha() for w in words)
