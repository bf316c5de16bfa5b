"""Tests for loading and storing the client configuration."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
from unittest.mock import call, patch
from xml.etree import ElementTree as ET

from nccfg.config.auth import AuthMethod, KeyPair
from nccfg.config.capabilities import DEFAULT_CAPABILITIES, CapabilitySet
from nccfg.config.document import read_document
from nccfg.config.history import NullHistory
from nccfg.errors import ConfigDocumentError, HomeDirectoryError
from nccfg.session import ClientConfigContext, load_config, store_config


def _capability_sections(path):
    root = ET.parse(path).getroot()
    return [ET.tostring(section) for section in root if section.tag == "capabilities"]


class TestLoadConfig:
    """Test suite for load_config."""

    def test_missing_directory_is_created(self, context, config_dir):
        """A first run creates the directory and both files, keeping defaults."""
        report = load_config(context)

        assert report.directory == config_dir
        assert config_dir.is_dir()
        assert (config_dir / "history").read_text() == ""
        assert (config_dir / "config.xml").read_text() == ""
        assert list(context.capabilities) == list(DEFAULT_CAPABILITIES)
        assert not report.document

    def test_history_is_loaded(self, context, history, config_dir):
        config_dir.mkdir()
        (config_dir / "history").write_text("get\nget-config running\n")

        report = load_config(context)

        assert report.history
        assert history.lines == ["get", "get-config running"]

    def test_document_without_capabilities_keeps_defaults(self, context, write_config):
        write_config("<netconf-client><authentication/></netconf-client>")
        report = load_config(context)
        assert report.document
        assert context.capabilities == CapabilitySet(DEFAULT_CAPABILITIES)

    def test_capabilities_replace_defaults(self, context, write_config):
        write_config(
            "<netconf-client><capabilities>"
            "<capability>urn:ietf:params:netconf:base:1.1</capability>"
            "<capability>urn:example:only</capability>"
            "</capabilities></netconf-client>"
        )
        load_config(context)
        assert context.capabilities == {"urn:ietf:params:netconf:base:1.1", "urn:example:only"}

    def test_empty_capabilities_keep_defaults(self, context, write_config, caplog):
        write_config("<netconf-client><capabilities/></netconf-client>")
        load_config(context)
        assert list(context.capabilities) == list(DEFAULT_CAPABILITIES)
        assert "keeping defaults" in caplog.text

    def test_load_resets_to_defaults(self, context, config_dir):
        context.capabilities = CapabilitySet(["urn:stale"])
        load_config(context)
        assert "urn:stale" not in context.capabilities

    def test_authentication_is_forwarded(self, history, mock_auth, write_config):
        write_config(
            "<netconf-client><authentication>"
            "<pref><publickey>2</publickey><certificate>3</certificate>"
            "<password>1</password></pref>"
            "<keys><key-path>/home/u/.ssh/id_rsa</key-path>"
            "<key-path>/home/u/.ssh/id_ecdsa</key-path></keys>"
            "</authentication></netconf-client>"
        )
        context = ClientConfigContext(auth=mock_auth, history=history)

        load_config(context)

        assert mock_auth.set_preference.call_args_list == [
            call(AuthMethod.PUBLIC_KEY, 2),
            call(AuthMethod.PASSWORD, 1),
        ]
        assert mock_auth.set_keypair.call_args_list[-1] == call(
            KeyPair("/home/u/.ssh/id_ecdsa", "/home/u/.ssh/id_ecdsa.pub")
        )

    def test_strict_priorities(self, history, mock_auth, write_config):
        write_config(
            "<netconf-client><authentication><pref>"
            "<publickey>first</publickey><password>1</password>"
            "</pref></authentication></netconf-client>"
        )
        context = ClientConfigContext(auth=mock_auth, history=history, strict_priorities=True)
        load_config(context)
        mock_auth.set_preference.assert_called_once_with(AuthMethod.PASSWORD, 1)

    def test_malformed_document_keeps_defaults(self, context, write_config, caplog):
        write_config("<netconf-client><capabilities><capability>urn:x")
        report = load_config(context)
        assert not report.document
        assert list(context.capabilities) == list(DEFAULT_CAPABILITIES)
        assert "Failed to load client configuration" in caplog.text

    def test_unrecognized_root_keeps_defaults(self, context, write_config):
        write_config(
            "<settings><capabilities><capability>urn:x</capability></capabilities></settings>"
        )
        report = load_config(context)
        assert not report.document
        assert "urn:x" not in context.capabilities

    def test_home_error_is_not_fatal(self, context, caplog):
        with patch(
            "nccfg.session.resolve_config_dir", side_effect=HomeDirectoryError("no home")
        ):
            report = load_config(context)
        assert report.directory is None
        assert list(context.capabilities) == list(DEFAULT_CAPABILITIES)
        assert "Unable to load configuration" in caplog.text

    def test_inaccessible_directory_skips_files(self, context, history):
        with patch("nccfg.session.resolve_config_dir", return_value=None):
            report = load_config(context)
        assert report.directory is None
        assert history.reads == []
        assert list(context.capabilities) == list(DEFAULT_CAPABILITIES)


class TestStoreConfig:
    """Test suite for store_config."""

    def test_store_creates_document_and_history(self, context, history, config_dir):
        history.lines = ["connect host", "get"]
        context.capabilities = CapabilitySet(["urn:a", "urn:b"])

        report = store_config(context)

        assert report.history and report.document
        assert (config_dir / "history").read_text() == "connect host\nget\n"
        root = ET.parse(config_dir / "config.xml").getroot()
        assert root.tag == "netconf-client"
        assert [c.text for c in root.find("capabilities")] == ["urn:a", "urn:b"]

    def test_round_trip(self, context, history):
        context.capabilities = CapabilitySet(["urn:x", "urn:y", "urn:z"])
        store_config(context)

        restored = ClientConfigContext(history=NullHistory())
        load_config(restored)

        assert restored.capabilities == CapabilitySet(["urn:z", "urn:y", "urn:x"])

    def test_store_is_idempotent(self, context, config_dir):
        load_config(context)
        store_config(context)
        first = _capability_sections(config_dir / "config.xml")
        store_config(context)
        second = _capability_sections(config_dir / "config.xml")
        assert first == second
        assert len(first) == 1

    def test_store_preserves_other_sections(self, context, write_config):
        path = write_config(
            "<netconf-client>"
            "<capabilities><capability>urn:old</capability></capabilities>"
            "<authentication><pref><password>1</password></pref>"
            "<keys><key-path>/k/id</key-path></keys></authentication>"
            "</netconf-client>"
        )
        load_config(context)
        context.capabilities.add("urn:new")
        store_config(context)

        root = ET.parse(path).getroot()
        assert [c.text for c in root.find("capabilities")] == ["urn:old", "urn:new"]
        assert root.find("authentication/pref/password").text == "1"
        assert root.find("authentication/keys/key-path").text == "/k/id"

    def test_store_replaces_malformed_document(self, context, write_config, caplog):
        path = write_config("<netconf-client><broken>")
        context.capabilities = CapabilitySet(["urn:a"])

        report = store_config(context)

        assert report.document
        assert [c.text for c in ET.parse(path).getroot().find("capabilities")] == ["urn:a"]
        assert "Replacing unreadable configuration" in caplog.text

    def test_write_failure_still_saves_history(self, context, history, config_dir, caplog):
        history.lines = ["get"]
        with patch("nccfg.session.write_document") as mock_write:
            mock_write.side_effect = ConfigDocumentError("Can not write configuration")
            report = store_config(context)

        assert report.history
        assert not report.document
        assert (config_dir / "history").read_text() == "get\n"
        assert "Can not write configuration" in caplog.text

    def test_home_error_is_not_fatal(self, context, history):
        with patch(
            "nccfg.session.resolve_config_dir", side_effect=HomeDirectoryError("no home")
        ):
            report = store_config(context)
        assert report.directory is None
        assert history.writes == []


class TestStoreSafety:
    """Stores that must not damage the existing document."""

    def test_capability_xml_cannot_hold_keeps_document_readable(self, context, write_config):
        path = write_config(
            "<netconf-client>"
            "<authentication><keys><key-path>/k/id</key-path></keys></authentication>"
            "</netconf-client>"
        )
        context.capabilities = CapabilitySet(["urn:a\x01", "urn:b"])

        store_config(context)
        restored = ClientConfigContext(history=NullHistory())
        load_config(restored)
        store_config(restored)

        tree = read_document(path)
        assert tree is not None
        root = tree.getroot()
        assert [c.text for c in root.find("capabilities")] == ["urn:b"]
        assert root.find("authentication/keys/key-path").text == "/k/id"
        assert restored.capabilities == {"urn:b"}

    def test_unrecognized_root_is_not_reported_as_stored(self, context, write_config):
        path = write_config("<settings><keep/></settings>")
        report = store_config(context)
        assert not report.document
        assert [child.tag for child in ET.parse(path).getroot()] == ["keep"]
