import pytest

import libhashing

@pytest.fixture(autouse=True)
def clean_config(monkeypatch, tmp_path):
	monkeypatch.setattr(libhashing, 'config', dict(libhashing.config))
	monkeypatch.setenv('HOME', str(tmp_path))
