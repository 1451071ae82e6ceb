from unittest.mock import MagicMock, patch

from linkgate.api.diff import ChangedFile, ChangeStatus
from linkgate.api.link import check_md_link


def _md_file(path) -> ChangedFile:
    return ChangedFile(status=ChangeStatus.ADDED, absolute_path=path, relative_path=path.name, extension="md")


def _response(status_code: int) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    return response


def test_check_md_link_local_targets(tmp_path):
    docs = tmp_path / "docs"
    docs.mkdir()
    (tmp_path / "img").mkdir()
    (tmp_path / "img" / "a.png").write_bytes(b"")
    document = docs / "guide.md"

    text = "![a](img/a.png) ![b](../img/a.png) ![c](./missing.png) [d](../nowhere.md)"
    assert check_md_link(text, _md_file(document)) == ["./missing.png", "../nowhere.md"]


def test_check_md_link_network_targets(tmp_path):
    responses = {"https://example.com/ok": _response(200), "https://example.com/gone": _response(404)}
    with patch("requests.get", side_effect=lambda url, timeout: responses[url]) as mock_get:
        invalid = check_md_link(
            "[ok](https://example.com/ok) [gone](https://example.com/gone)", _md_file(tmp_path / "a.md")
        )

    assert invalid == ["https://example.com/gone"]
    assert [call.args[0] for call in mock_get.call_args_list] == [
        "https://example.com/ok",
        "https://example.com/gone",
    ]


def test_check_md_link_checks_duplicates_each_time(tmp_path):
    with patch("requests.get", return_value=_response(500)) as mock_get:
        invalid = check_md_link("[a](http://x.test) [b](http://x.test)", _md_file(tmp_path / "a.md"), timeout=1.0)

    assert invalid == ["http://x.test", "http://x.test"]
    assert mock_get.call_count == 2
    assert mock_get.call_args.kwargs["timeout"] == 1.0


def test_check_md_link_no_links(tmp_path):
    with patch("requests.get") as mock_get:
        assert check_md_link("# Nothing here", _md_file(tmp_path / "a.md")) == []
    mock_get.assert_not_called()


def test_check_md_link_absolute_target(tmp_path):
    tool_dir = tmp_path / "linkgate"
    tool_dir.mkdir()
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "logo.svg").write_text("<svg/>", encoding="utf-8")

    invalid = check_md_link(
        "![logo](/assets/logo.svg) ![gone](/assets/gone.svg)", _md_file(tmp_path / "a.md"), tool_dir=tool_dir
    )
    assert invalid == ["/assets/gone.svg"]
