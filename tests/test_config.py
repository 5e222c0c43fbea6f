"""Test settings, file name sanitization and run tracking."""
import logging

import pytest

from trafexia.config import Settings, load_settings
from trafexia.tracking import track_run
from trafexia.utils import make_collection_filename, sanitize_name


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ('TRAFEXIA_LOG_LEVEL', 'TRAFEXIA_EXPORT_NAME',
                    'TRAFEXIA_STATIC_EXPORT_NAME', 'TRAFEXIA_OUTPUT_DIR'):
            monkeypatch.delenv(var, raising=False)
        settings = load_settings()
        assert settings == Settings()
        assert settings.level == logging.WARNING

    def test_environment(self, monkeypatch):
        monkeypatch.setenv('TRAFEXIA_LOG_LEVEL', 'debug')
        monkeypatch.setenv('TRAFEXIA_STATIC_EXPORT_NAME', 'Static')
        monkeypatch.setenv('TRAFEXIA_OUTPUT_DIR', '/tmp/exports')
        settings = load_settings()
        assert settings.level == logging.DEBUG
        assert settings.static_export_name == 'Static'
        assert settings.output_dir == '/tmp/exports'

    def test_unknown_level_falls_back(self):
        assert Settings(log_level='chatty').level == logging.WARNING

    def test_dict_round_trip(self):
        settings = Settings(export_name='Capture', output_dir='out')
        assert Settings.from_dict(settings.to_dict()) == settings


class TestSanitize:

    def test_collection_filename(self):
        assert make_collection_filename('Trafexia Static Analysis') == \
            'Trafexia_Static_Analysis.postman_collection.json'

    def test_path_characters_removed(self):
        assert sanitize_name('../etc/passwd') == 'etc_passwd'
        assert sanitize_name('Shop: v2 <beta>') == 'Shop_v2_beta'

    def test_empty(self):
        assert sanitize_name('') == 'collection'
        assert sanitize_name('***') == 'collection'

    def test_truncated(self):
        assert len(sanitize_name('a' * 300)) == 100


class TestTrackRun:

    def test_success_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger='trafexia.tracking'):
            with track_run('analyze', {'package': 'app.apk'}) as tracker:
                tracker['url_count'] = 2
        assert 'Run completed: analyze' in caplog.text
        assert 'url_count=2' in caplog.text

    def test_failure_logged_and_reraised(self, caplog):
        with caplog.at_level(logging.INFO, logger='trafexia.tracking'):
            with pytest.raises(ValueError):
                with track_run('export-requests', {}):
                    raise ValueError('boom')
        assert 'Run failed: export-requests' in caplog.text
        assert 'boom' in caplog.text
