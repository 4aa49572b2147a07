from __future__ import annotations

import json
from pathlib import Path

import pytest
from ruamel.yaml import YAML

from lbtosca.exceptions import InputFileError, LoadBalancerConfigError
from lbtosca.main import build_parser, load_input_file, main

LB_ARN = (
    "arn:aws:elasticloadbalancing:us-east-1:123:loadbalancer/app/my-lb/50dc6c495c0c9188"
)


def _load_output(text: str):
    return YAML(typ="safe").load(text)


# ---------------------------------------------------------------------------
# argument parsing
# ---------------------------------------------------------------------------


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_parser_resolve_options():
    args = build_parser().parse_args(["--debug", "resolve", "--port", "8080"])
    assert args.debug is True
    assert args.command == "resolve"
    assert args.port == 8080
    assert args.protocol is None


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["resolve", "--port", "8080"], {"protocol": "HTTP", "port": 8080}),
        (["resolve", "--protocol", "https"], {"protocol": "HTTPS", "port": 443}),
        (
            ["resolve", "--protocol", "HTTP", "--port", "443"],
            {"protocol": "HTTP", "port": 443},
        ),
        (["resolve"], {"protocol": None, "port": None}),
    ],
)
def test_resolve(capsys, argv, expected):
    assert main(argv) == 0
    assert _load_output(capsys.readouterr().out) == expected


def test_resolve_unknown_port_exit_code(capsys):
    assert main(["resolve", "--port", "9999"]) == 1
    assert capsys.readouterr().out == ""


def test_resolve_unknown_protocol_exit_code():
    assert main(["resolve", "--protocol", "SCTP"]) == 1


# ---------------------------------------------------------------------------
# validate-protocol
# ---------------------------------------------------------------------------


def test_validate_protocol_ok(capsys):
    assert main(["validate-protocol", "tcp_udp"]) == 0
    assert _load_output(capsys.readouterr().out) == {
        "protocol": "TCP_UDP",
        "valid": True,
    }


@pytest.mark.parametrize("protocol", ["HTTP", "GENEVE"])
def test_validate_protocol_rejected(protocol):
    assert main(["validate-protocol", protocol]) == 1


# ---------------------------------------------------------------------------
# parse-arn
# ---------------------------------------------------------------------------


def test_parse_arn(capsys):
    assert main(["parse-arn", LB_ARN]) == 0
    assert _load_output(capsys.readouterr().out) == {
        "load_balancer_full_name": "app/my-lb/50dc6c495c0c9188"
    }


@pytest.mark.parametrize(
    "arn",
    [
        "not-an-arn",
        "arn:aws:elasticloadbalancing:us-east-1:123:loadbalancer",
        "arn:aws:elasticloadbalancing:us-east-1:123:/app/my-lb/50dc",
    ],
)
def test_parse_arn_errors(arn):
    assert main(["parse-arn", arn]) == 2


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------


@pytest.fixture
def lb_yaml(tmp_path: Path) -> Path:
    f = tmp_path / "lb.yaml"
    f.write_text(
        "attributes:\n"
        "  idle_timeout.timeout_seconds: 60\n"
        "  access_logs.s3.bucket: null\n"
        "  deletion_protection.enabled: true\n"
        "tags:\n"
        "  Name: web\n"
        "  Stack: demo\n"
    )
    return f


def test_render_yaml(capsys, lb_yaml: Path):
    assert main(["render", str(lb_yaml)]) == 0
    assert _load_output(capsys.readouterr().out) == {
        "attributes": [
            {"key": "idle_timeout.timeout_seconds", "value": "60"},
            {"key": "deletion_protection.enabled", "value": "true"},
        ],
        "tags": [
            {"key": "Name", "value": "web"},
            {"key": "Stack", "value": "demo"},
        ],
    }


def test_render_json(capsys, tmp_path: Path):
    f = tmp_path / "lb.json"
    f.write_text(json.dumps({"attributes": {"a": "1", "b": None}}))
    assert main(["render", str(f)]) == 0
    assert _load_output(capsys.readouterr().out) == {
        "attributes": [{"key": "a", "value": "1"}],
        "tags": [],
    }


def test_render_missing_file(tmp_path: Path):
    assert main(["render", str(tmp_path / "missing.yaml")]) == 3


def test_render_section_must_be_mapping(tmp_path: Path):
    f = tmp_path / "lb.yaml"
    f.write_text("tags:\n  - a\n  - b\n")
    assert main(["render", str(f)]) == 3


@pytest.mark.parametrize(
    "content",
    ["attributes: []\n", "tags: ''\n", "attributes: 0\n", "tags: false\n"],
)
def test_render_falsy_section_must_be_mapping(tmp_path: Path, content: str):
    f = tmp_path / "lb.yaml"
    f.write_text(content)
    assert main(["render", str(f)]) == 3


def test_render_null_sections_are_empty(capsys, tmp_path: Path):
    f = tmp_path / "lb.yaml"
    f.write_text("attributes: null\ntags:\n")
    assert main(["render", str(f)]) == 0
    assert _load_output(capsys.readouterr().out) == {"attributes": [], "tags": []}


# ---------------------------------------------------------------------------
# load_input_file
# ---------------------------------------------------------------------------


def test_load_input_file_unsupported_extension(tmp_path: Path):
    f = tmp_path / "lb.txt"
    f.write_text("attributes: {}")
    with pytest.raises(InputFileError, match="Unsupported extension"):
        load_input_file(f)


def test_load_input_file_invalid_json(tmp_path: Path):
    f = tmp_path / "lb.json"
    f.write_text("{not json")
    with pytest.raises(InputFileError, match="Cannot parse lb.json"):
        load_input_file(f)


def test_load_input_file_top_level_must_be_mapping(tmp_path: Path):
    f = tmp_path / "lb.yml"
    f.write_text("- a\n- b\n")
    with pytest.raises(InputFileError, match="must be a mapping"):
        load_input_file(f)


def test_load_input_file_empty_yaml(tmp_path: Path):
    f = tmp_path / "lb.yaml"
    f.write_text("")
    assert load_input_file(f) == {}


# ---------------------------------------------------------------------------
# exit codes
# ---------------------------------------------------------------------------


def test_run_maps_base_config_error_to_exit_code_4(monkeypatch):
    def _raise(_path):
        raise LoadBalancerConfigError("generic failure")

    monkeypatch.setattr("lbtosca.main.load_input_file", _raise)
    assert main(["render", "lb.yaml"]) == 4


def test_run_maps_unexpected_error_to_exit_code_9(monkeypatch):
    def _raise(_path):
        raise RuntimeError("boom")

    monkeypatch.setattr("lbtosca.main.load_input_file", _raise)
    assert main(["render", "lb.yaml"]) == 9
