import textwrap

from configlint.linter.scanner import scan_text


def _scan(text: str):
    return scan_text(textwrap.dedent(text))


def test_yaml_sections_and_line_numbers(valid_config):
    config = scan_text(valid_config)

    assert config.metadata_line == 1
    assert config.settings_line == 4
    assert config.features_line == 7
    assert config.metadata["name"].value == "awesome"
    assert config.metadata["name"].line == 2
    assert config.settings["timeout"].value == "60"
    assert len(config.features) == 1
    assert config.features[0].line == 8
    assert config.features[0].fields["enabled"].value == "true"


def test_json_document():
    config = _scan(
        """\
        {
          "metadata": {
            "name": "awesome",
            "env": "prod"
          },
          "settings": {
            "replicas": 2,
            "timeout": 60
          },
          "features": [
            {
              "name": "featureA",
              "enabled": true
            },
            {
              "name": "featureB",
              "enabled": false
            }
          ]
        }
        """
    )

    assert config.metadata_line == 2
    assert config.metadata["env"].value == "prod"
    assert config.settings["replicas"].value == "2"
    assert [f.fields["name"].value for f in config.features] == ["featureA", "featureB"]
    assert [f.line for f in config.features] == [12, 16]


def test_comments_and_blank_lines_keep_line_numbers():
    config = _scan(
        """\
        # deployment config

        settings:
          # how many pods
          replicas: 3
        """
    )

    assert config.settings_line == 3
    assert config.settings["replicas"].line == 5


def test_last_write_wins_for_duplicate_keys():
    config = _scan(
        """\
        settings:
          replicas: 0
          replicas: 4
        """
    )

    assert config.settings["replicas"].value == "4"
    assert config.settings["replicas"].line == 3


def test_bare_marker_anchors_entry_on_marker_line():
    config = _scan(
        """\
        features:
          -
            name: a
            enabled: true
          - name: b
            enabled: false
        """
    )

    assert [f.line for f in config.features] == [2, 5]
    assert config.features[1].fields["name"].value == "b"


def test_bare_marker_without_fields_is_dropped():
    config = _scan(
        """\
        features:
          -
          - name: a
            enabled: true
          -
        """
    )

    assert len(config.features) == 1
    assert config.features[0].line == 3


def test_explicitly_closed_empty_entry_is_kept():
    config = _scan(
        """\
        features:
          - {}
          - name: a
            enabled: true
        """
    )

    assert len(config.features) == 2
    assert config.features[0].fields == {}
    assert config.features[0].line == 2


def test_fields_without_marker_open_an_entry():
    config = _scan(
        """\
        features:
            name: a
            enabled: true
        """
    )

    assert len(config.features) == 1
    assert config.features[0].line == 2


def test_nested_structure_start_adds_no_field():
    config = _scan(
        """\
        settings:
          replicas: 1
          resources: {
            cpu: 2
          }
        """
    )

    assert "resources" not in config.settings
    # No indentation awareness: nested keys land in the enclosing section
    assert config.settings["cpu"].value == "2"


def test_section_keyword_switches_section_anywhere():
    config = _scan(
        """\
        metadata:
          name: svc
        features:
          - name: a
            enabled: true
            metadata: nested
            owner: team-a
        """
    )

    assert config.metadata_line == 1
    assert config.metadata["owner"].value == "team-a"
    assert len(config.features) == 1
    assert "owner" not in config.features[0].fields


def test_first_header_line_is_recorded():
    config = _scan(
        """\
        settings:
          replicas: 1
        metadata:
          name: a
        settings:
          timeout: 5
        """
    )

    assert config.settings_line == 1
    assert set(config.settings) == {"replicas", "timeout"}


def test_keys_before_any_section_are_ignored():
    config = _scan(
        """\
        version: 2
        metadata:
          name: a
        """
    )

    assert "version" not in config.metadata
    assert config.settings == {}


def test_crlf_line_endings():
    config = scan_text("metadata:\r\n  name: svc\r\n  env: dev\r\n")

    assert config.metadata["name"].value == "svc"
    assert config.metadata["env"].line == 3
