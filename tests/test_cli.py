"""Test the click command-line interface."""
import json

import pytest
from click.testing import CliRunner

from conftest import API_URL, AUTH_URL
from trafexia.cli.main import cli


@pytest.fixture
def runner(monkeypatch, tmp_path):
    for var in ('TRAFEXIA_LOG_LEVEL', 'TRAFEXIA_EXPORT_NAME', 'TRAFEXIA_STATIC_EXPORT_NAME'):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv('TRAFEXIA_OUTPUT_DIR', str(tmp_path / 'out'))
    return CliRunner()


class TestAnalyzeCommand:

    def test_plain(self, runner, shop_package):
        result = runner.invoke(cli, ['analyze', str(shop_package), '--plain'])
        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == [API_URL, AUTH_URL]

    def test_print_json(self, runner, shop_package):
        result = runner.invoke(cli, ['analyze', str(shop_package), '--print-json', '--name', 'Shop'])
        assert result.exit_code == 0, result.output
        doc = json.loads(result.stdout)
        assert doc['info']['name'] == 'Shop'
        assert len(doc['item']) == 2

    def test_table(self, runner, shop_package):
        result = runner.invoke(cli, ['analyze', str(shop_package)])
        assert result.exit_code == 0, result.output
        assert 'Checkout' in result.stdout
        assert 'Authentication' in result.stdout
        assert '2 entries scanned' not in result.stdout
        assert '3 entries scanned in 2 container(s)' in result.stdout

    def test_output_file(self, runner, shop_package, tmp_path):
        target = tmp_path / 'exports' / 'shop.json'
        result = runner.invoke(cli, ['analyze', str(shop_package), '--plain', '-o', str(target)])
        assert result.exit_code == 0, result.output
        doc = json.loads(target.read_text(encoding='utf-8'))
        assert doc['info']['name'] == 'Trafexia Static Analysis'

    def test_save_uses_output_dir(self, runner, shop_package, tmp_path):
        result = runner.invoke(cli, ['analyze', str(shop_package), '--plain', '--save', '--name', 'My App'])
        assert result.exit_code == 0, result.output
        assert (tmp_path / 'out' / 'My_App.postman_collection.json').exists()

    def test_partial_results_reported(self, runner, tmp_path, make_zip):
        package = tmp_path / 'app.xapk'
        package.write_bytes(make_zip({
            'broken.apk': b'nope',
            'classes.dex': b'https://api.shop.io/v1/cart',
        }))
        result = runner.invoke(cli, ['analyze', str(package)])
        assert result.exit_code == 0, result.output
        assert 'Skipped 1 item(s)' in result.stdout
        assert 'broken.apk' in result.stdout

    def test_not_a_zip_exits_with_error(self, runner, tmp_path):
        package = tmp_path / 'bad.apk'
        package.write_bytes(b'plain text')
        result = runner.invoke(cli, ['analyze', str(package), '--plain'])
        assert result.exit_code == 1
        assert 'Cannot open container' in result.stdout


class TestExportRequestsCommand:

    def _write_capture(self, tmp_path, payload):
        path = tmp_path / 'capture.json'
        path.write_text(json.dumps(payload), encoding='utf-8')
        return path

    def test_stdout(self, runner, tmp_path):
        capture = self._write_capture(tmp_path, [
            {'method': 'POST', 'url': API_URL, 'host': 'api.example-shop.com', 'path': '/v1/cart/add',
             'requestHeaders': {'content-type': 'application/json'}, 'requestBody': '{}'},
        ])
        result = runner.invoke(cli, ['export-requests', str(capture), '--stdout'])
        assert result.exit_code == 0, result.output
        doc = json.loads(result.stdout)
        assert doc['info']['name'] == 'Trafexia Export'
        assert doc['item'][0]['name'] == 'POST /v1/cart/add'

    def test_wrapped_requests_to_file(self, runner, tmp_path):
        capture = self._write_capture(tmp_path, {'requests': [
            {'method': 'GET', 'url': AUTH_URL, 'host': 'auth.example-shop.com', 'path': '/login'},
        ]})
        target = tmp_path / 'capture.postman.json'
        result = runner.invoke(cli, ['export-requests', str(capture), '-o', str(target), '--name', 'Cap'])
        assert result.exit_code == 0, result.output
        doc = json.loads(target.read_text(encoding='utf-8'))
        assert doc['info']['name'] == 'Cap'
        assert len(doc['item']) == 1

    def test_invalid_json(self, runner, tmp_path):
        path = tmp_path / 'capture.json'
        path.write_text('{not json', encoding='utf-8')
        result = runner.invoke(cli, ['export-requests', str(path), '--stdout'])
        assert result.exit_code == 1
        assert 'not valid JSON' in result.output

    def test_missing_url(self, runner, tmp_path):
        capture = self._write_capture(tmp_path, [{'method': 'GET'}])
        result = runner.invoke(cli, ['export-requests', str(capture), '--stdout'])
        assert result.exit_code == 1
        assert 'malformed request entry' in result.output

    def test_headers_not_an_object(self, runner, tmp_path):
        capture = self._write_capture(tmp_path, [
            {'method': 'GET', 'url': AUTH_URL, 'requestHeaders': 'abc'},
        ])
        result = runner.invoke(cli, ['export-requests', str(capture), '--stdout'])
        assert result.exit_code == 1
        assert 'malformed request entry' in result.output

    def test_file_not_utf8(self, runner, tmp_path):
        path = tmp_path / 'capture.json'
        path.write_bytes(b'[{"url": "\xff"}]')
        result = runner.invoke(cli, ['export-requests', str(path), '--stdout'])
        assert result.exit_code == 1
        assert 'not valid JSON' in result.output


class TestCategoriesCommand:

    def test_lists_categories(self, runner):
        result = runner.invoke(cli, ['categories'])
        assert result.exit_code == 0, result.output
        assert 'Promotion' in result.stdout
        assert 'Other APIs' in result.stdout
