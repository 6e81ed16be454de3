import asyncio

from bot.roulette_bot import RouletteBot
from tests.conftest import make_notes


def _make_bot():
    return RouletteBot({"bot": {"prefix": "?"}, "wheel": {"default_language": "en"}})


def test_bot_reads_prefix_and_settings():
    bot = _make_bot()
    assert bot.command_prefix == "?"
    assert bot.settings.default_language == "en"
    assert bot.notes == ()


def test_language_is_kept_per_guild():
    bot = _make_bot()
    assert bot.get_language(1) == "en"
    assert bot.set_language(1, "ES") == "es"
    assert bot.get_language(1) == "es"
    assert bot.get_language(2) == "en"
    # unknown codes fall back to spanish
    assert bot.set_language(3, "fr") == "es"


def test_reload_keeps_old_notes_on_failure(monkeypatch):
    async def scenario():
        bot = _make_bot()
        loaded = make_notes(3)
        responses = [loaded, []]

        async def fake_fetch():
            return responses.pop(0)

        monkeypatch.setattr(bot.note_source, "fetch_notes", fake_fetch)

        assert await bot.reload_notes() == 3
        assert bot.notes == tuple(loaded)

        assert await bot.reload_notes() == 0
        assert bot.notes == tuple(loaded)

    asyncio.run(scenario())
