"""Tests for file-share extraction and download URL derivation."""

from __future__ import annotations

from app.talkbridge.richtext.attachments import (
    build_download_url,
    extract_file_parameters,
    resolve_attachments,
)
from app.talkbridge.richtext.models import AttachmentDescriptor, ParameterRecord

BASE = "https://cloud.example.com"


def _file(**kwargs: object) -> ParameterRecord:
    kwargs.setdefault("type", "file")
    kwargs.setdefault("id", "1")
    kwargs.setdefault("name", "test.jpg")
    return ParameterRecord(**kwargs)  # type: ignore[arg-type]


class TestExtractFileParameters:
    def test_none(self) -> None:
        assert extract_file_parameters(None) == []

    def test_filters_non_file_types(self) -> None:
        params = {
            "actor": ParameterRecord(type="user", id="alice", name="Alice"),
            "file": _file(),
            "call": ParameterRecord(type="call", id="c", name="Call"),
            "untyped": ParameterRecord(name="no type"),
        }
        assert extract_file_parameters(params) == [params["file"]]

    def test_only_non_file_types(self) -> None:
        params = {f"u{i}": ParameterRecord(type="user", id=str(i), name="U") for i in range(5)}
        assert extract_file_parameters(params) == []

    def test_order_preserved(self) -> None:
        params = {"file0": _file(name="photo1.jpg"), "file1": _file(name="photo2.jpg")}
        assert [p.name for p in extract_file_parameters(params)] == ["photo1.jpg", "photo2.jpg"]

    def test_nameless_file_passes(self) -> None:
        params = {"file": _file(name=None)}
        assert len(extract_file_parameters(params)) == 1

    def test_type_is_case_sensitive(self) -> None:
        assert extract_file_parameters({"f": _file(type="File")}) == []


class TestBuildDownloadUrl:
    def test_webdav_url(self) -> None:
        url = build_download_url(_file(path="Talk/test.jpg"), BASE, "Vault")
        assert url == "https://cloud.example.com/remote.php/dav/files/Vault/Talk/test.jpg"

    def test_webdav_preferred_over_link(self) -> None:
        record = _file(path="Talk/test.jpg", link="https://evil.example.net/f/1")
        url = build_download_url(record, BASE, "Vault")
        assert url == "https://cloud.example.com/remote.php/dav/files/Vault/Talk/test.jpg"
        assert "evil" not in url

    def test_account_percent_encoded(self) -> None:
        url = build_download_url(_file(path="Talk/a.jpg"), BASE, "john doe@x/y")
        assert url == "https://cloud.example.com/remote.php/dav/files/john%20doe%40x%2Fy/Talk/a.jpg"

    def test_account_keeps_uri_component_marks(self) -> None:
        url = build_download_url(_file(path="Talk/a.jpg"), BASE, "o'neil(bot)*!")
        assert url == "https://cloud.example.com/remote.php/dav/files/o'neil(bot)*!/Talk/a.jpg"

    def test_path_used_verbatim(self) -> None:
        url = build_download_url(_file(path="Talk/My%20Pics/a b.jpg"), BASE, "Vault")
        assert url is not None
        assert url.endswith("/Vault/Talk/My%20Pics/a b.jpg")

    def test_trailing_slash_on_base(self) -> None:
        url = build_download_url(_file(path="Talk/a.jpg"), BASE + "/", "Vault")
        assert url == "https://cloud.example.com/remote.php/dav/files/Vault/Talk/a.jpg"

    def test_link_when_account_missing(self) -> None:
        record = _file(path="Talk/test.jpg", link="https://cloud.example.com/f/1")
        assert build_download_url(record, BASE, None) == "https://cloud.example.com/f/1"

    def test_link_when_base_missing(self) -> None:
        record = _file(path="Talk/test.jpg", link="https://cloud.example.com/f/1")
        assert build_download_url(record, "", "Vault") == "https://cloud.example.com/f/1"

    def test_link_when_path_missing(self) -> None:
        record = _file(link="https://cloud.example.com/f/1")
        assert build_download_url(record, BASE, "Vault") == "https://cloud.example.com/f/1"

    def test_none_when_nothing_available(self) -> None:
        assert build_download_url(_file(), "", None) is None

    def test_empty_link_is_none(self) -> None:
        assert build_download_url(_file(link=""), "", None) is None


class TestResolveAttachments:
    def test_descriptors(self) -> None:
        params = {
            "file": _file(
                name="IMG_1.jpg",
                path="Talk/IMG_1.jpg",
                link="https://host/f/1",
                mimetype="image/jpeg",
                size=42,
                preview_available="yes",
            ),
            "actor": ParameterRecord(type="user", id="alice", name="Alice"),
        }
        (att,) = resolve_attachments(params, BASE, "Vault")
        assert att == AttachmentDescriptor(
            name="IMG_1.jpg",
            mimetype="image/jpeg",
            size=42,
            download_url="https://cloud.example.com/remote.php/dav/files/Vault/Talk/IMG_1.jpg",
            path="Talk/IMG_1.jpg",
            preview_available="yes",
        )

    def test_empty(self) -> None:
        assert resolve_attachments({}) == ()
        assert resolve_attachments(None) == ()

    def test_without_config_uses_link(self) -> None:
        params = {"file": _file(path="Talk/a.jpg", link="https://host/f/1")}
        (att,) = resolve_attachments(params)
        assert att.download_url == "https://host/f/1"
