import json
import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.development_storage import dev_blob_endpoint
from tools import issue_grant


def test_prints_grant_as_json(capsys):
    exit_code = issue_grant.main(["--connection-string", "UseDevelopmentStorage=true", "--json"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["url"] == dev_blob_endpoint()
    assert "sp=c" in payload["sasKey"]
    assert payload["expiresOn"]


def test_prints_upload_url_for_blob(capsys):
    issue_grant.main(
        ["--connection-string", "UseDevelopmentStorage=true", "--blob", "cat.png", "--permissions", "cw"]
    )

    url = capsys.readouterr().out.strip()
    assert url.startswith(f"{dev_blob_endpoint()}/images/cat-")
    assert ".png?" in url
    assert "sp=cw" in url


def test_reads_connection_string_from_environment(monkeypatch, capsys):
    monkeypatch.delenv("STORAGE_CONNECTION_SETTING", raising=False)
    monkeypatch.setenv("AzureWebJobsStorage", "UseDevelopmentStorage=true")

    issue_grant.main(["--container", "avatars"])

    output = capsys.readouterr().out
    assert f"URL:     {dev_blob_endpoint()}" in output
    assert "SAS:" in output


@pytest.mark.parametrize(
    "extra",
    [
        ["--permissions", "z"],
        ["--hours", "0"],
        ["--hours", "nan"],
        ["--hours", "inf"],
        ["--hours", "-inf"],
        ["--hours", "1e20"],
    ],
)
def test_rejects_invalid_arguments(extra):
    with pytest.raises(SystemExit) as excinfo:
        issue_grant.main(["--connection-string", "UseDevelopmentStorage=true", *extra])

    assert excinfo.value.code == 2


def test_cli_reports_classified_failures(monkeypatch, capsys):
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "issue_grant.py",
            "--connection-string",
            "BlobEndpoint=https://acct.blob.core.windows.net;SharedAccessSignature=sv=1&sig=x",
        ],
    )

    assert issue_grant.cli() == 1
    assert capsys.readouterr().err.startswith("error: ")
