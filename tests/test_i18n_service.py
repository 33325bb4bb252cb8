"""Unit tests for I18nService lookup and fallback."""

from pathlib import Path

from common.i18n import I18nService

REPO_LOCALES = Path(__file__).resolve().parent.parent / "locales"


class TestI18nService:
    def test_detects_languages_from_directories(self, i18n_service):
        assert i18n_service.supported_languages == ["en", "zh"]

    def test_translates_in_requested_language(self, i18n_service):
        assert i18n_service.t("organization.userOrgSuffix", "zh") == "的工作空间"

    def test_unknown_language_falls_back_to_default(self, i18n_service):
        assert i18n_service.t("organization.userOrgSuffix", "fr") == "'s Workspace"

    def test_missing_key_returns_key_or_default(self, i18n_service):
        assert i18n_service.t("organization.nope") == "organization.nope"
        assert i18n_service.t("organization.nope", default="x") == "x"

    def test_interpolates_variables(self, i18n_service):
        assert i18n_service.t("organization.greeting", name="Ada") == "Hello Ada"

    def test_has(self, i18n_service):
        assert i18n_service.has("organization.userOrgSuffix")
        assert not i18n_service.has("organization.missing")

    def test_missing_directory_keeps_default_language(self, tmp_path):
        service = I18nService(locales_dir=str(tmp_path / "absent"), default_language="en")
        assert service.supported_languages == ["en"]
        assert service.t("organization.userOrgSuffix") == "organization.userOrgSuffix"

    def test_bad_json_is_skipped(self, tmp_path):
        (tmp_path / "en").mkdir()
        (tmp_path / "en" / "broken.json").write_text("{not json", encoding="utf-8")

        service = I18nService(locales_dir=str(tmp_path))

        assert service.t("broken.key") == "broken.key"

    def test_shipped_locales_define_org_suffix(self):
        service = I18nService(locales_dir=str(REPO_LOCALES), supported_languages=["en", "zh"])
        for lang in ("en", "zh"):
            assert service.has("organization.userOrgSuffix", lang)

    def test_is_supported(self, i18n_service):
        assert i18n_service.is_supported("zh")
        assert not i18n_service.is_supported("fr")
        assert not i18n_service.is_supported(None)
