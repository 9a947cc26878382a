"""
Tests for the validation coordinator.

Exercises whole validation runs over resource trees written to a temporary
directory, plus property-based checks on in-memory documents.
"""

from hypothesis import given, strategies as st

from android_strings_validator.errors import ErrorHandler
from android_strings_validator.models import (
    ResourceDocument,
    StringEntry,
    StringArrayEntry,
    PluralEntry,
    PluralItem,
)
from android_strings_validator.validation import (
    FindingKind,
    ValidationConfig,
    ValidationCoordinator,
    validate,
)
from android_strings_validator.validation.rules import POTENTIAL_PLACEHOLDER_RE


names = st.from_regex(r"[a-z][a-z0-9_]{0,8}", fullmatch=True)
clean_values = st.text(alphabet="abcsd1$% ", max_size=20).filter(
    lambda value: not POTENTIAL_PLACEHOLDER_RE.search(value)
)


@st.composite
def resource_documents(draw):
    """Documents whose values pass every single-value rule."""
    string_names = draw(st.lists(names, unique=True, max_size=6))
    array_names = draw(st.lists(names, unique=True, max_size=3))
    plural_names = draw(st.lists(names, unique=True, max_size=3))
    return ResourceDocument(
        strings=[StringEntry(name, draw(clean_values)) for name in string_names],
        string_arrays=[
            StringArrayEntry(name, draw(st.lists(clean_values, max_size=4)))
            for name in array_names
        ],
        plurals=[
            PluralEntry(name, [PluralItem(q, draw(clean_values)) for q in ("one", "other")])
            for name in plural_names
        ],
    )


class TestValidationRun:
    """Tests for ValidationCoordinator.validate over files on disk."""

    def test_identical_translation_has_no_findings(self, write_resources, res_dir):
        kwargs = dict(
            strings=[("app_name", "Example"), ("welcome", "Hello %s, you have %1$d items")],
            arrays=[("planets", ["Mercury", "Venus", "Earth"])],
            plurals=[("songs", [("one", "%d song"), ("other", "%d songs")])],
        )
        write_resources(locale="", **kwargs)
        write_resources(locale="de", **kwargs)

        assert validate(res_dir, "", "strings.xml", show_missing=False) == []
        assert validate(res_dir, "", "strings.xml", show_missing=True) == []

    def test_missing_translations_reported_only_when_requested(self, write_resources, res_dir):
        write_resources(
            locale="",
            strings=[("a", "A"), ("b", "B"), ("c", "C")],
            arrays=[("list", ["1", "2"])],
        )
        write_resources(locale="fr", strings=[("a", "A")])

        assert validate(res_dir, "", "strings.xml", show_missing=False) == []

        findings = validate(res_dir, "", "strings.xml", show_missing=True)
        assert [f.kind for f in findings] == [FindingKind.MISSING_RESOURCE] * 3
        assert [str(f) for f in findings] == [
            "[missing] element named b in values-fr/strings.xml",
            "[missing] element named c in values-fr/strings.xml",
            "[missing] element named list in values-fr/strings.xml",
        ]

    def test_string_without_base_value(self, write_resources, res_dir):
        write_resources(locale="", strings=[("a", "A")])
        write_resources(locale="es", strings=[("a", "A"), ("extra_key", "Extra")])

        findings = validate(res_dir, "", "strings.xml")

        assert len(findings) == 1
        assert findings[0].kind == FindingKind.VALIDATION_FAILURE
        assert "extra_key" in str(findings[0])
        assert "does not have a base value" in str(findings[0])
        assert str(findings[0]) == "extra_key in values-es/strings.xml does not have a base value."

    def test_rule_violations_are_prefixed_with_name_and_path(self, write_resources, res_dir):
        write_resources(locale="", strings=[("greeting", "Hello %s")])
        write_resources(locale="it", strings=[("greeting", "Ciao %d")])

        findings = validate(res_dir, "", "strings.xml")

        assert len(findings) == 1
        assert findings[0].entry_name == "greeting"
        assert findings[0].file_path == "values-it/strings.xml"
        assert findings[0].rule == "named_placeholders"
        assert str(findings[0]) == (
            "greeting in values-it/strings.xml: "
            "The target string placeholder #0 is %d, while it probably should be %s"
        )

    def test_every_failing_rule_is_reported(self, write_resources, res_dir):
        write_resources(locale="", strings=[("promo", "%s gets %1$s")])
        write_resources(locale="nl", strings=[("promo", "krijgt % korting\nnu")])

        findings = validate(res_dir, "", "strings.xml")

        assert [f.rule for f in findings] == [
            "named_placeholders",
            "positional_placeholders",
            "potential_placeholder",
            "newline",
        ]

    def test_array_count_mismatch_reports_once(self, write_resources, res_dir):
        write_resources(locale="", arrays=[("days", ["Mon %s", "Tue %s", "Wed %s"])])
        write_resources(locale="de", arrays=[("days", ["Mo", "Di"])])

        findings = validate(res_dir, "", "strings.xml")

        assert len(findings) == 1
        assert str(findings[0]) == "days array in values-de/strings.xml has 2 items, but it should have 3"

    def test_array_items_compared_by_index(self, write_resources, res_dir):
        write_resources(locale="", arrays=[("sizes", ["%d small", "%s large"])])
        write_resources(locale="pl", arrays=[("sizes", ["%d mały", "%d duży"])])

        findings = validate(res_dir, "", "strings.xml")

        assert len(findings) == 1
        assert findings[0].entry_name == "sizes"
        assert "placeholder #0 is %d, while it probably should be %s" in str(findings[0])

    def test_plurals_only_checked_for_single_values(self, write_resources, res_dir):
        write_resources(locale="", plurals=[("songs", [("one", "%d song"), ("other", "%d songs")])])
        write_resources(locale="ru", plurals=[
            ("songs", [("one", "%s"), ("few", "% песни"), ("many", "песен")]),
            ("albums", [("other", "line\nbreak")]),
        ])

        findings = validate(res_dir, "", "strings.xml", show_missing=True)

        assert [(f.entry_name, f.rule) for f in findings] == [
            ("songs", "potential_placeholder"),
            ("albums", "newline"),
        ]

    def test_base_plurals_missing_in_translation_are_not_reported(self, write_resources, res_dir):
        write_resources(locale="", plurals=[("songs", [("other", "%d songs")])])
        write_resources(locale="ja", strings=[])

        assert validate(res_dir, "", "strings.xml", show_missing=True) == []

    def test_duplicate_translation_uses_first_definition(self, write_resources, res_dir):
        write_resources(locale="", strings=[("x", "%s")])
        write_resources(locale="fi", strings=[("x", "%s"), ("x", "no placeholder")])

        assert validate(res_dir, "", "strings.xml") == []

    def test_base_locale_file_is_not_validated(self, write_resources, res_dir):
        write_resources(locale="", strings=[("a", "bad % value")])
        write_resources(locale="en", strings=[("a", "A")])

        findings = validate(res_dir, "en", "strings.xml")

        assert len(findings) == 1
        assert findings[0].file_path == "values/strings.xml"

    def test_findings_follow_file_order(self, write_resources, res_dir):
        write_resources(locale="", strings=[("a", "A")])
        for locale in ("de", "fr"):
            write_resources(locale=locale, strings=[("a", "A"), (f"only_{locale}", "x")])

        findings = ValidationCoordinator(ValidationConfig()).validate(res_dir, "", "strings.xml")

        assert [f.file_path for f in findings] == ["values-de/strings.xml", "values-fr/strings.xml"]

    def test_custom_file_name(self, write_resources, res_dir):
        write_resources(locale="", strings=[("a", "%s")], filename="common.xml")
        write_resources(locale="de", strings=[("a", "")], filename="common.xml")
        write_resources(locale="de", strings=[("a", "%d")])

        findings = validate(res_dir, "", "common.xml")

        assert len(findings) == 1
        assert findings[0].file_path == "values-de/common.xml"


class TestStructuralFailures:
    """Tests for unreadable and malformed files."""

    def test_missing_base_file_stops_the_run(self, write_resources, res_dir):
        write_resources(locale="de", strings=[("a", "% bad")])

        findings = validate(res_dir, "en", "strings.xml")

        assert len(findings) == 1
        assert findings[0].kind == FindingKind.IO_ERROR
        assert findings[0].is_structural
        assert "values-en" in str(findings[0])

    def test_malformed_base_file_stops_the_run(self, write_resources, res_dir):
        write_resources(locale="", raw="<resources><string>")
        write_resources(locale="de", strings=[("a", "% bad")])

        findings = validate(res_dir, "", "strings.xml")

        assert len(findings) == 1
        assert findings[0].kind == FindingKind.PARSE_ERROR

    def test_missing_res_dir(self, tmp_path):
        findings = validate(tmp_path / "missing", "", "strings.xml")

        assert len(findings) == 1
        assert findings[0].kind == FindingKind.IO_ERROR

    def test_malformed_translation_is_skipped(self, write_resources, res_dir):
        write_resources(locale="", strings=[("a", "A")])
        write_resources(locale="de", raw="not xml at all")
        write_resources(locale="fr", strings=[("a", "A"), ("stale", "S")])

        findings = validate(res_dir, "", "strings.xml")

        assert [f.kind for f in findings] == [FindingKind.PARSE_ERROR, FindingKind.VALIDATION_FAILURE]
        assert "values-de" in str(findings[0])
        assert "stale" in str(findings[1])

    def test_unreadable_translation_is_skipped(self, write_resources, res_dir):
        write_resources(locale="en", strings=[("a", "A")])
        write_resources(locale="de", strings=[("a", "A"), ("stale", "S")])
        (res_dir / "values" / "strings.xml").mkdir(parents=True)
        handler = ErrorHandler()
        coordinator = ValidationCoordinator(ValidationConfig(), error_handler=handler)

        findings = coordinator.validate(res_dir, "en", "strings.xml")

        assert [f.kind for f in findings] == [FindingKind.VALIDATION_FAILURE, FindingKind.IO_ERROR]
        assert "stale" in str(findings[0])
        assert findings[1].file_path == str(res_dir / "values" / "strings.xml")
        assert [e.error_code for e in handler.errors] == ["FILE_002"]

    def test_directory_named_like_a_translation_is_reported(self, write_resources, res_dir):
        write_resources(locale="", strings=[("a", "A")])
        (res_dir / "values-de" / "strings.xml").mkdir(parents=True)

        findings = validate(res_dir, "", "strings.xml")

        assert len(findings) == 1
        assert findings[0].kind == FindingKind.IO_ERROR
        assert "values-de" in str(findings[0])

    def test_structural_errors_are_recorded_by_error_handler(self, res_dir):
        handler = ErrorHandler()
        coordinator = ValidationCoordinator(ValidationConfig(), error_handler=handler)

        coordinator.validate(res_dir, "", "strings.xml")

        assert handler.has_errors()
        assert handler.errors[0].error_code == "FILE_001"


class TestValidationOptions:
    """Tests for configurable behaviour."""

    def test_disabled_rule_is_skipped(self):
        config = ValidationConfig()
        config.disable_rule("newline")
        coordinator = ValidationCoordinator(config)
        base = ResourceDocument(strings=[StringEntry("a", "A")])
        translated = ResourceDocument(strings=[StringEntry("a", "line\nbreak")])

        assert coordinator.validate_document(base, translated, "values-de/strings.xml") == []

    def test_default_config_is_not_shared_between_coordinators(self):
        first = ValidationCoordinator()
        first.config.disable_rule("newline")
        second = ValidationCoordinator()
        base = ResourceDocument(strings=[StringEntry("a", "A")])
        translated = ResourceDocument(strings=[StringEntry("a", "line\nbreak")])

        assert second.config is not first.config
        assert second.config.is_rule_enabled("newline")
        assert len(second.validate_document(base, translated, "values-de/strings.xml")) == 1

    def test_duplicates_reported_when_enabled(self):
        coordinator = ValidationCoordinator(ValidationConfig(report_duplicates=True))
        base = ResourceDocument(strings=[StringEntry("x", "X")])
        translated = ResourceDocument(strings=[StringEntry("x", "X"), StringEntry("x", "Y")])

        findings = coordinator.validate_document(base, translated, "values-de/strings.xml")

        assert len(findings) == 1
        assert findings[0].rule == "duplicate_string"
        assert str(findings[0]) == (
            "x in values-de/strings.xml is defined 2 times; only the first definition is validated"
        )

    def test_duplicates_not_reported_by_default(self):
        coordinator = ValidationCoordinator(ValidationConfig())
        base = ResourceDocument(strings=[StringEntry("x", "X")])
        translated = ResourceDocument(strings=[StringEntry("x", "X"), StringEntry("x", "Y")])

        assert coordinator.validate_document(base, translated, "values-de/strings.xml") == []


class TestValidationProperties:
    """Property-based tests on in-memory documents."""

    @given(resource_documents(), st.booleans())
    def test_identical_copy_has_no_findings(self, document, show_missing):
        coordinator = ValidationCoordinator(ValidationConfig(show_missing=show_missing))

        assert coordinator.validate_document(document, document, "values-xx/strings.xml") == []

    @given(resource_documents(), st.data())
    def test_one_missing_finding_per_absent_base_entry(self, document, data):
        kept_strings = data.draw(st.lists(st.sampled_from(document.strings), unique_by=lambda e: e.name)
                                 if document.strings else st.just([]))
        kept_arrays = data.draw(st.lists(st.sampled_from(document.string_arrays), unique_by=lambda e: e.name)
                                if document.string_arrays else st.just([]))
        translated = ResourceDocument(strings=kept_strings, string_arrays=kept_arrays)
        absent = (len(document.strings) - len(kept_strings)) + (len(document.string_arrays) - len(kept_arrays))

        shown = ValidationCoordinator(ValidationConfig(show_missing=True)).validate_document(
            document, translated, "values-xx/strings.xml")
        hidden = ValidationCoordinator(ValidationConfig(show_missing=False)).validate_document(
            document, translated, "values-xx/strings.xml")

        assert sum(f.kind == FindingKind.MISSING_RESOURCE for f in shown) == absent
        assert not any(f.kind == FindingKind.MISSING_RESOURCE for f in hidden)
