import pytest

from inidoc import (
    IniDocument,
    IniSection,
    LineEnding,
    NoBoundPathError,
    UnsupportedLineEnding,
    loads,
)


@pytest.fixture
def doc():
    return loads('[Window]\nwidth=800\ntitle= My App\npad=  two\n'
                 '[General]\napp_name=MyApp\n', line_ending='\n')


def test_get_absent(doc):
    assert doc.get('Nope', 'width') is None
    assert doc.get('Window', 'nope') is None
    assert doc.get('Window', 'nope', '0') == '0'


def test_get_strips_one_leading_space(doc):
    assert doc.get('Window', 'title') == 'My App'
    assert doc.get('Window', 'pad') == ' two'
    # stored value is untouched
    assert doc.config_map['Window']['title'] == ' My App'


def test_set_creates_section(doc):
    doc.set('S', 'k', 'v')
    assert doc.get('S', 'k') == 'v'
    doc.set('S', 'k', 'w')
    assert doc.get('S', 'k') == 'w'


def test_remove(doc):
    doc.remove('Window', 'width')
    assert doc.get('Window', 'width') is None
    doc.remove('Window', 'width')
    doc.remove('Nope', 'width')
    assert 'Nope' not in doc


def test_remove_section(doc):
    doc.remove_section('Window')
    for key in ('width', 'title', 'pad'):
        assert doc.get('Window', key) is None
    doc.remove_section('Window')
    assert list(doc) == ['General']


def test_serialize_empty():
    assert IniDocument().serialize() == ''
    assert str(IniDocument()) == ''


def test_serialize_sorted():
    doc = IniDocument(line_ending=LineEnding.LF)
    doc.set('B', 'z', '1')
    doc.set('B', 'a', '2')
    doc.set('A', 'k', 'v')
    assert doc.serialize() == '[A]\nk=v\n[B]\na=2\nz=1\n'
    assert str(doc) == doc.serialize()


def test_serialize_crlf(doc):
    out = doc.serialize(line_ending='\r\n')
    assert out.startswith('[General]\r\napp_name=MyApp\r\n[Window]\r\n')
    assert '\n' not in out.replace('\r\n', '')


def test_serialize_blank_lines():
    doc = loads('[A]\nk=v\n[B]\nx=y\n', line_ending='\n')
    assert doc.serialize(blank_lines=1) == '[A]\nk=v\n\n[B]\nx=y\n\n'


def test_serialize_empty_section():
    doc = IniDocument(line_ending='\n')
    doc['Empty'] = {}
    assert doc.serialize() == '[Empty]\n'


def test_insertion_order_mode():
    doc = IniDocument(line_ending='\n', sort_keys=False)
    doc.set('B', 'z', '1')
    doc.set('B', 'a', '2')
    doc.set('A', 'k', 'v')
    assert list(doc) == ['B', 'A']
    assert list(doc['B']) == ['z', 'a']
    assert doc.serialize() == '[B]\nz=1\na=2\n[A]\nk=v\n'


def test_line_ending_option():
    assert LineEnding.native() in (LineEnding.CRLF, LineEnding.LF)
    assert IniDocument().line_ending is LineEnding.native()
    assert IniDocument(line_ending='\r\n').line_ending is LineEnding.CRLF
    with pytest.raises(UnsupportedLineEnding):
        IniDocument(line_ending='\r')
    with pytest.raises(UnsupportedLineEnding):
        IniDocument().serialize(line_ending='mac')
    doc = IniDocument()
    with pytest.raises(ValueError):
        doc.line_ending = 'x'


def test_save_without_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    doc = loads('[A]\nk=v\n')
    with pytest.raises(NoBoundPathError):
        doc.save()
    assert list(tmp_path.iterdir()) == []


def test_save_after_binding(tmp_path):
    doc = loads('[A]\nk=v\n', line_ending='\r\n')
    doc.path = tmp_path / 'a.ini'
    assert doc.save() == len(b'[A]\r\nk=v\r\n')
    assert (tmp_path / 'a.ini').read_bytes() == b'[A]\r\nk=v\r\n'


def test_save_truncates(tmp_path):
    path = tmp_path / 'a.ini'
    path.write_text('[Old]\n' + 'x=1\n' * 100)
    doc = IniDocument(path, line_ending='\n')
    doc.set('New', 'k', 'v')
    assert doc.save() == path.stat().st_size
    assert path.read_text() == '[New]\nk=v\n'


def test_save_encoding(tmp_path):
    doc = IniDocument(tmp_path / 'a.ini', line_ending='\n')
    doc.set('A', 'name', '小节')
    assert doc.save() == len('[A]\nname=小节\n'.encode('utf-8'))


def test_mapping_access(doc):
    section = doc['Window']
    assert isinstance(section, IniSection)
    assert section.name == 'Window'
    assert str(section) == '[Window]'
    assert section['width'] == '800'

    section['height'] = '600'
    del section['pad']
    assert doc.config_map['Window'] == {
        'width': '800', 'title': ' My App', 'height': '600'}
    assert list(section) == ['height', 'title', 'width']
    assert section.to_dict() == {
        'height': '600', 'title': ' My App', 'width': '800'}
    with pytest.raises(KeyError):
        doc['Nope']


def test_mapping_setitem_copies(doc):
    src = {'k': 'v'}
    doc['New'] = src
    src['k'] = 'changed'
    assert doc.get('New', 'k') == 'v'

    doc['Copy'] = doc['Window']
    doc['Copy']['width'] = '1'
    assert doc.get('Window', 'width') == '800'


def test_mapping_protocol(doc):
    assert len(doc) == 2
    assert list(doc) == ['General', 'Window']
    assert 'Window' in doc
    del doc['Window']
    assert 'Window' not in doc
    assert len(doc.setdefault('Fresh')) == 0
    assert doc.get('Fresh', 'a') is None
    assert 'Fresh' in doc


def test_direct_config_map_access(doc):
    doc.config_map['Raw'] = {'k': 'v'}
    doc.config_map['General']['app_name'] = 'Other'
    assert doc.get('Raw', 'k') == 'v'
    assert doc.get('General', 'app_name') == 'Other'
    assert '[Raw]\nk=v\n' in doc.serialize()


def test_repr():
    assert repr(IniDocument()) == '<IniDocument (unbound) { .sections = 0 }>'
