#
# Measurekit - Locales Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from babel import Locale

# Local ----------------------------------------------------------------------------------------------------------------
from measurekit.locales import get_locale, upper


# Tests ----------------------------------------------------------------------------------------------------------------

class TestGetLocale:
    """Test locale resolution from identifiers and babel Locales."""

    @pytest.mark.parametrize(
        "identifier, language, territory",
        [
            pytest.param("en", "en", None, id="language"),
            pytest.param("de_DE", "de", "DE", id="posix"),
            pytest.param("de-DE", "de", "DE", id="bcp47"),
            pytest.param("tr", "tr", None, id="turkish"),
        ],
    )
    def test_identifier(self, identifier, language, territory):
        loc = get_locale(identifier)
        assert loc.language == language
        assert loc.territory == territory

    def test_locale_passes_through(self):
        loc = Locale("fr")
        assert get_locale(loc) is loc

    def test_none_resolves_to_default(self):
        assert get_locale(None) == Locale("en")
        assert get_locale(None, default="de") == Locale("de")
        assert get_locale(default=Locale("it")) == Locale("it")

    @pytest.mark.parametrize(
        "locale",
        [
            pytest.param(42, id="int"),
            pytest.param(b"en", id="bytes"),
            pytest.param(["en"], id="list"),
        ],
    )
    def test_type_error(self, locale):
        with pytest.raises(TypeError, match="locale must be"):
            get_locale(locale)

    @pytest.mark.parametrize(
        "locale",
        [
            pytest.param("xx", id="unknown-language"),
            pytest.param("", id="empty"),
            pytest.param("not a locale", id="garbage"),
        ],
    )
    def test_value_error(self, locale):
        with pytest.raises(ValueError, match="unknown locale identifier"):
            get_locale(locale)


class TestUpper:
    """Test locale-aware upper-casing."""

    @pytest.mark.parametrize(
        "text, locale, expected",
        [
            pytest.param(" mi", "en", " MI", id="en"),
            pytest.param(" mi", "tr", " Mİ", id="tr"),
            pytest.param(" mi", "az", " Mİ", id="az"),
            pytest.param(" mi", "tr_TR", " Mİ", id="tr-territory"),
            pytest.param(" rad", "de", " RAD", id="de"),
            pytest.param("°", "tr", "°", id="no-letters"),
            pytest.param("", "en", "", id="empty"),
        ],
    )
    def test_upper(self, text, locale, expected):
        assert upper(text, locale) == expected

    def test_default_locale(self):
        assert upper("km") == "KM"
