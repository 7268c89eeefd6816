"""
Tests for variant resolution.
"""

from unittest.mock import MagicMock

import pytest

from pkgwright.core.choice import resolve_variant
from pkgwright.domain.errors import ConfigurationError, InvalidChoiceError
from pkgwright.domain.models import PackageVariant
from pkgwright.infra.prompt import FixedPrompt


class TestOverride:
    """PKGWRIGHT_VARIANT handling."""

    def test_standard_override(self, settings):
        prompt = MagicMock()
        target = resolve_variant(settings.targets(), "standard", prompt)
        assert target.variant == PackageVariant.STANDARD
        assert target.package_name == "lumen"
        prompt.ask.assert_not_called()

    def test_electron_override(self, settings):
        target = resolve_variant(settings.targets(), "electron", MagicMock())
        assert target.package_name == "lumen-electron"

    @pytest.mark.parametrize("override", ["Electron", "STANDARD", "lumen"])
    def test_override_must_match_key_exactly(self, settings, override):
        prompt = MagicMock()
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_variant(settings.targets(), override, prompt)
        assert override in str(exc_info.value)
        prompt.ask.assert_not_called()

    def test_invalid_override(self, settings):
        prompt = MagicMock()
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_variant(settings.targets(), "flatpak", prompt)
        assert "flatpak" in str(exc_info.value)
        prompt.ask.assert_not_called()

    def test_invalid_override_is_not_a_menu_error(self, settings):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_variant(settings.targets(), "2", MagicMock())
        assert not isinstance(exc_info.value, InvalidChoiceError)

    def test_blank_override_falls_back_to_menu(self, settings):
        prompt = FixedPrompt("2")
        target = resolve_variant(settings.targets(), "   ", prompt)
        assert target.variant == PackageVariant.ELECTRON


class TestMenu:
    """Interactive menu handling."""

    def test_empty_answer_defaults_to_first(self, settings):
        prompt = FixedPrompt("")
        target = resolve_variant(settings.targets(), None, prompt)
        assert target.variant == PackageVariant.STANDARD

    def test_default_answer_is_one(self, settings):
        prompt = FixedPrompt()
        target = resolve_variant(settings.targets(), "", prompt)
        assert target.variant == PackageVariant.STANDARD
        assert len(prompt.questions) == 1

    def test_second_option(self, settings):
        target = resolve_variant(settings.targets(), None, FixedPrompt(" 2 "))
        assert target.variant == PackageVariant.ELECTRON

    @pytest.mark.parametrize("answer", ["3", "0", "electron", "1 2", "x"])
    def test_invalid_answer(self, settings, answer):
        with pytest.raises(InvalidChoiceError) as exc_info:
            resolve_variant(settings.targets(), None, FixedPrompt(answer))
        assert "Invalid choice" in str(exc_info.value)

    def test_menu_lists_both_packages(self, settings):
        prompt = MagicMock()
        prompt.ask.return_value = "1"
        resolve_variant(settings.targets(), None, prompt)
        shown = " ".join(call.args[0] for call in prompt.show.call_args_list)
        assert "lumen" in shown
        assert "lumen-electron" in shown
