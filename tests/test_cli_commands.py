from __future__ import annotations

import pytest
from typer.testing import CliRunner

from libvrf_cli import main as cli_main

runner = CliRunner()


def _values(output: str) -> dict:
    out = {}
    for line in output.splitlines():
        key, sep, value = line.partition("=")
        if sep and " " not in key:
            out[key] = value
    return out


def test_list_types():
    result = runner.invoke(cli_main.app, ["list-types"])
    assert result.exit_code == 0
    assert "EC_VRF_P256_SHA256_TAI  family=ec  proof_len=80" in result.stdout
    assert "RSA_FDH_VRF_RSA2048_SHA256  family=rsa  proof_len=256" in result.stdout
    assert result.stdout.count("- ") == 9


def test_demo_uses_default_type(monkeypatch):
    monkeypatch.delenv("LIBVRF_DEFAULT_TYPE", raising=False)
    result = runner.invoke(cli_main.app, ["demo"])
    assert result.exit_code == 0
    assert "[RSA_FDH_VRF_RSA2048_SHA256] proof=256 bytes verify=True deterministic=True" in result.stdout


def test_demo_reads_env_default(monkeypatch):
    monkeypatch.setenv("LIBVRF_DEFAULT_TYPE", "EC_VRF_P256_SHA256_TAI")
    result = runner.invoke(cli_main.app, ["demo", "--input", "abc"])
    assert result.exit_code == 0
    assert "[EC_VRF_P256_SHA256_TAI] proof=80 bytes verify=True" in result.stdout


def test_invalid_env_default(monkeypatch):
    monkeypatch.setenv("LIBVRF_DEFAULT_TYPE", "NOT_A_TYPE")
    with pytest.raises(ValueError):
        cli_main._default_type()
    result = runner.invoke(cli_main.app, ["demo"])
    assert result.exit_code == 2


def test_unknown_type_argument():
    result = runner.invoke(cli_main.app, ["roundtrip", "BOGUS"])
    assert result.exit_code == 2


def test_roundtrip_then_verify():
    result = runner.invoke(cli_main.app, ["roundtrip", "RSA_PSS_NOSALT_VRF_RSA2048_SHA256", "--input", "hi"])
    assert result.exit_code == 0
    values = _values(result.stdout)
    pk_hex, proof_hex = values["public_key"], values["proof"]

    ok = runner.invoke(cli_main.app, ["verify", "RSA_PSS_NOSALT_VRF_RSA2048_SHA256", pk_hex, proof_hex, "hi"])
    assert ok.exit_code == 0
    assert "verify=True" in ok.stdout
    assert _values(ok.stdout)["value"] == values["value"]

    bad = runner.invoke(cli_main.app, ["verify", "RSA_PSS_NOSALT_VRF_RSA2048_SHA256", pk_hex, proof_hex, "ho"])
    assert bad.exit_code == 1
    assert "verify=False" in bad.stdout


def test_verify_malformed_material():
    result = runner.invoke(cli_main.app, ["verify", "EC_VRF_P256_SHA256_TAI", "02" + "00" * 10, "11" * 80, "x"])
    assert result.exit_code == 1
    result = runner.invoke(cli_main.app, ["verify", "EC_VRF_P256_SHA256_TAI", "zz", "11", "x"])
    assert result.exit_code == 2


def test_cli_exposes_only_vrf_commands():
    result = runner.invoke(cli_main.app, ["run-tests"])
    assert result.exit_code == 2
    help_text = runner.invoke(cli_main.app, ["--help"]).stdout
    for command in ("list-types", "demo", "roundtrip", "verify"):
        assert command in help_text
