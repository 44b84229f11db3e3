import pytest

pytest.importorskip("data_designer")

from data_designer_content_integrity.config import ContentIntegrityColumnConfig  # noqa: E402
from data_designer_content_integrity.generator import _collect_sources, analyze_row  # noqa: E402

TEXT = (
    "I love this city. Honestly, I was thrilled when we finally moved here after years of waiting, "
    "and my kids were so happy they ran straight into the yard screaming about the huge old oak tree by the fence."
)


def _config(**kwargs):
    return ContentIntegrityColumnConfig(name="integrity", target_columns=["text"], **kwargs)


class TestColumnConfig:
    def test_exported_from_package(self):
        import data_designer_content_integrity

        assert data_designer_content_integrity.ContentIntegrityColumnConfig is ContentIntegrityColumnConfig
        assert "ContentIntegrityColumnConfig" in data_designer_content_integrity.__all__

    def test_defaults(self):
        config = _config()
        assert config.column_type == "content-integrity"
        assert config.min_characters == 100
        assert config.include_advice
        assert not config.include_enhancements

    def test_required_columns_include_sources(self):
        config = _config(source_columns=["refs", "text"])
        assert config.required_columns == ["text", "refs"]

    def test_rejects_negative_min_characters(self):
        with pytest.raises(ValueError):
            _config(min_characters=-1)


class TestAnalyzeRow:
    def test_short_text_is_not_analyzed(self):
        output = analyze_row("Too short.", [], _config())
        assert output == {"is_valid": False, "status": "insufficient_text", "character_count": 10}

    def test_analyzed_row(self):
        output = analyze_row(TEXT, [], _config(include_enhancements=True, max_enhancements=1))
        assert output["status"] == "analyzed"
        assert output["similarity_score"] == 0.0
        assert isinstance(output["advice"], list)
        assert len(output["enhancements"]) <= 1

    def test_copied_row_is_invalid(self):
        output = analyze_row(TEXT, [TEXT], _config(include_advice=False))
        assert output["similarity_flagged"]
        assert not output["is_valid"]
        assert "advice" not in output


class TestCollectSources:
    def test_strings_and_lists(self):
        assert _collect_sources(["a source", ["b", "", 3], None, float("nan")]) == ["a source", "b"]
