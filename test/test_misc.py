from contextlib import redirect_stderr
from io import StringIO

import cyrtrans
from cyrtrans import misc


wiki = cyrtrans.get_schema('wikipedia')


def test_transfer_case_lower():
    assert cyrtrans.transfer_case('shch', 'щ') == 'shch'


def test_transfer_case_first_letter():
    assert cyrtrans.transfer_case('shch', 'Щ') == 'Shch'
    assert cyrtrans.transfer_case('ŝ', 'Щ') == 'Ŝ'


def test_transfer_case_whole():
    assert cyrtrans.transfer_case('shch', 'Щ', whole=True) == 'SHCH'
    assert cyrtrans.transfer_case('shch', 'щ', whole=True) == 'shch'


def test_transfer_case_empty_replacement():
    assert cyrtrans.transfer_case('', 'Ь') == ''


def test_is_caps():
    assert cyrtrans.is_caps('ЮЛИЯ')
    assert cyrtrans.is_caps('ЙОШКАР-ОЛА')
    assert not cyrtrans.is_caps('Я')
    assert not cyrtrans.is_caps('Юлия')
    assert not cyrtrans.is_caps('123')


def test_unmapped_chars():
    counts = cyrtrans.unmapped_chars('Ѣ ѣ Юлия Ѣ abc', wiki)
    assert counts == {'Ѣ': 2, 'ѣ': 1}


def test_report_unmapped():
    out = StringIO()
    counts = cyrtrans.report_unmapped('Ѳеодоръ', wiki, file=out)
    assert counts == {'Ѳ': 1}
    assert 'CYRILLIC CAPITAL LETTER FITA' in out.getvalue()
    assert "'wikipedia'" in out.getvalue()


def test_report_unmapped_silent():
    out = StringIO()
    assert not cyrtrans.report_unmapped('Юлия', wiki, file=out)
    assert out.getvalue() == ''


def test_word_re():
    assert misc.WORD_RE.split('Йошкар-Ола, 2') == ['', 'Йошкар', '-', 'Ола',
                                                   ', ', '2', '']


def test_report_unmapped_follows_redirected_stderr():
    err = StringIO()
    with redirect_stderr(err):
        counts = cyrtrans.report_unmapped('Ѳеодоръ', wiki)
    assert counts == {'Ѳ': 1}
    assert 'CYRILLIC CAPITAL LETTER FITA' in err.getvalue()
