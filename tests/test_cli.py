# File: tests/test_cli.py
"""Тесты для CLI (`sitecheck.cli`) с использованием click.testing.CliRunner.
Проверяют команды `check`, `config`, `--version`, а также обработку ошибок.
"""
import json

import pytest
from click.testing import CliRunner

import sitecheck.cli as cli_module
from sitecheck.aggregator import ReportBuilder
from sitecheck.cli import cli
from sitecheck.crawler.models import LinkDescriptor, LinkOutcome, SeedResult


@pytest.fixture(autouse=True)
def patch_run_checks(monkeypatch):
    """Патчим run_checks: фиктивный отчёт без сети, вызовы запоминаются."""
    calls = []

    async def fake_run(urls, cfg):
        calls.append((list(urls), cfg))
        builder = ReportBuilder()
        for url in urls:
            builder.record_seed(SeedResult(url, "Hello"), passed=True)
            entry = builder.start_links(url)
            entry.add(LinkOutcome.ok(LinkDescriptor("About", f"{url}/about")))
        return builder.finalize()

    monkeypatch.setattr(cli_module, "run_checks", fake_run)
    return calls


@pytest.fixture()
def urls_file(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_text("  https://a.example \n\nhttps://b.example\n", encoding="utf-8")
    return path


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "SiteCheck" in result.output


def test_show_config(tmp_path):
    cfg_file = tmp_path / "config.json"
    cfg_file.write_text(json.dumps({"max_links": 5, "engine": "http"}), encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["max_links"] == 5
    assert data["link_timeout"] == 5.0


def test_check_writes_text_log(tmp_path, urls_file, patch_run_checks):
    out = tmp_path / "test-log.txt"
    runner = CliRunner()
    result = runner.invoke(cli, ["check", str(urls_file), "--output", str(out)])
    assert result.exit_code == 0, result.output

    urls, _ = patch_run_checks[0]
    assert urls == ["https://a.example", "https://b.example"]
    text = out.read_text(encoding="utf-8")
    assert text.startswith("--- PASSED ---\nURL: https://a.example, Title: Hello\n")
    assert "    [PASS] About -> https://b.example/about\n" in text
    assert "Passed: 2, failed: 0" in result.output


def test_check_json_and_html(tmp_path, urls_file):
    out_json = tmp_path / "report.json"
    out_html = tmp_path / "report.html"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "check", str(urls_file),
            "--output", str(tmp_path / "log.txt"),
            "--json", str(out_json),
            "--html", str(out_html),
        ],
    )
    assert result.exit_code == 0, result.output
    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert [s["url"] for s in data["passed"]] == ["https://a.example", "https://b.example"]
    assert "https://a.example/about" in out_html.read_text(encoding="utf-8")


def test_overrides_reach_config(tmp_path, urls_file, patch_run_checks):
    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "--max-links", "3",
            "check", str(urls_file),
            "--output", str(tmp_path / "log.txt"),
            "--engine", "playwright",
            "--print",
        ],
    )
    assert result.exit_code == 0, result.output
    _, cfg = patch_run_checks[0]
    assert cfg.max_links == 3
    assert cfg.engine == "playwright"
    assert "--- FAILED ---" in result.output


def test_empty_url_list_is_an_error(tmp_path):
    empty = tmp_path / "urls.txt"
    empty.write_text("\n   \n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["check", str(empty), "--output", str(tmp_path / "log.txt")])
    assert result.exit_code != 0
    assert "пуст" in result.output


def test_bad_config_is_an_error(tmp_path, urls_file):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("link_timeout: 10\nlink_budget: 1\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "check", str(urls_file)])
    assert result.exit_code != 0
    assert "Ошибка загрузки конфигурации" in result.output
