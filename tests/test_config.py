import pytest
import yaml

from dutree.config import ScanOptions


def test_defaults():
    options = ScanOptions(folder='/r')
    assert options.max_depth == 0
    assert options.top == 0
    assert not options.inverted
    assert not options.include_hidden
    assert options.validate() is None


def test_from_yaml(tmp_path):
    path = tmp_path / 'dutree.yaml'
    path.write_text(yaml.safe_dump({'folder': '/data', 'top': 5, 'human_readable': True}))
    options = ScanOptions.from_yaml(str(path))
    assert options == ScanOptions(folder='/data', top=5, human_readable=True)


def test_from_yaml_overrides(tmp_path):
    path = tmp_path / 'dutree.yaml'
    path.write_text('folder: /data\ntop: 5\n')
    options = ScanOptions.from_yaml(str(path), top=2, tree=None)
    assert options.top == 2
    assert options.tree is False
    assert options.folder == '/data'


def test_from_yaml_empty_file(tmp_path):
    path = tmp_path / 'dutree.yaml'
    path.write_text('')
    assert ScanOptions.from_yaml(str(path), folder='/x') == ScanOptions(folder='/x')


def test_from_yaml_unknown_key(tmp_path):
    path = tmp_path / 'dutree.yaml'
    path.write_text('colour: red\n')
    with pytest.raises(TypeError):
        ScanOptions.from_yaml(str(path))


def test_from_yaml_not_a_mapping(tmp_path):
    path = tmp_path / 'dutree.yaml'
    path.write_text('- a\n- b\n')
    with pytest.raises(TypeError):
        ScanOptions.from_yaml(str(path))


@pytest.mark.parametrize('kwargs,message', [
    ({}, 'folder is required'),
    ({'folder': '/r', 'max_depth': -1}, 'max depth must be >= 0'),
    ({'folder': '/r', 'top': -3}, 'top must be >= 0'),
    ({'folder': '/r', 'workers': -1}, 'workers must be >= 0'),
])
def test_validate(kwargs, message):
    assert ScanOptions(**kwargs).validate() == message
