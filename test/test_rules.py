import pytest

import cyrtrans
from cyrtrans import BaseRule
from cyrtrans import ContextRule
from cyrtrans import EndingRule


base = BaseRule({'ю': 'yu', 'л': 'l', 'и': 'i', 'я': 'ya'})
prev = ContextRule({(None, 'е'): 'ye', ('ь', 'е'): 'ye'}, cyrtrans.PREV)
next_ = ContextRule({('ь', 'о'): 'y', ('ъ', None): ''}, cyrtrans.NEXT)
endings = EndingRule({'й': 'j', 'ий': 'y', 'ый': 'y'})


def test_rule_repr():
    assert repr(base) == 'BaseRule(4 entries)'
    assert repr(prev) == 'ContextRule(prev, 2 entries)'


def test_base_rule_lookup():
    assert base.lookup(None, 'ю', None) == 'yu'
    assert base.lookup('л', 'Я', 'л') == 'ya'
    assert base.lookup(None, 'q', None) is None


def test_context_rule_word_start():
    assert prev.lookup(None, 'е', 'л') == 'ye'
    assert prev.lookup('л', 'е', 'л') is None
    assert prev.lookup('Ь', 'Е', None) == 'ye'


def test_context_rule_word_end():
    assert next_.lookup('о', 'ъ', None) == ''
    assert next_.lookup('о', 'ъ', 'е') is None
    assert next_.lookup('б', 'Ь', 'О') == 'y'


def test_context_rule_side():
    with pytest.raises(ValueError):
        ContextRule({}, 'sideways')


def test_ending_rule_longest_match():
    assert endings.match('синий') == (3, 'y')
    assert endings.match('мой') == (2, 'j')
    assert endings.match('ВЕЛИКИЙ') == (5, 'y')
    assert endings.match('дом') is None


def test_ending_rule_short_words():
    assert endings.match('ий') is None
    assert endings.match('й') is None
    assert EndingRule({'мой': 'x'}).match('мой') is None


def test_ending_rule_lookup_is_noop():
    assert endings.lookup('и', 'й', None) is None


def test_rule_letters():
    assert prev.letters() == {'е', 'ь'}
    assert endings.letters() == {'и', 'й', 'ы'}


def test_rule_is_immutable():
    with pytest.raises(AttributeError):
        base.table = {}
    with pytest.raises(TypeError):
        base.table['ю'] = 'ju'
    with pytest.raises(AttributeError):
        prev.side = cyrtrans.NEXT


def test_rule_container():
    assert 'ю' in base
    assert len(base) == 4
    assert not EndingRule({})
    assert sorted(base) == ['и', 'л', 'ю', 'я']
