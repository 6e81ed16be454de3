import asyncio

import aiohttp

from roulette import note_source
from roulette.models import Note
from roulette.note_source import NoteSource


def test_parse_notes_reads_api_format():
    payload = [
        {"_id": "a1", "title": "Write docs", "description": "README first"},
        {"_id": "b2", "title": "  Fix login  "},
    ]
    assert NoteSource.parse_notes(payload) == [
        Note(id="a1", label="Write docs", detail="README first"),
        Note(id="b2", label="Fix login", detail=""),
    ]


def test_parse_notes_accepts_plain_keys():
    notes = NoteSource.parse_notes([{"id": 7, "label": "Seven", "detail": "lucky"}])
    assert notes == [Note(id="7", label="Seven", detail="lucky")]


def test_parse_notes_skips_bad_entries():
    payload = [
        {"_id": "a1", "title": "Keep"},
        {"title": "No id"},
        {"_id": "c3", "title": "   "},
        {"_id": "a1", "title": "Duplicate"},
        "not a dict",
        {"_id": "d4", "title": "Also keep"},
    ]
    assert [n.id for n in NoteSource.parse_notes(payload)] == ["a1", "d4"]


def test_parse_notes_rejects_non_list_payload():
    assert NoteSource.parse_notes({"notes": []}) == []
    assert NoteSource.parse_notes(None) == []


class _FakeResponse:
    def __init__(self, status, payload):
        self.status = status
        self._payload = payload

    async def json(self, content_type=None):
        return self._payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


def _session_factory(status, payload, requested):
    class _FakeSession:
        def __init__(self, *args, **kwargs):
            pass

        def get(self, url):
            requested.append(url)
            return _FakeResponse(status, payload)

        async def __aenter__(self):
            return self

        async def __aexit__(self, *exc):
            return False

    return _FakeSession


def test_fetch_notes_success(monkeypatch):
    requested = []
    payload = [{"_id": "a1", "title": "One"}, {"_id": "a2", "title": "Two"}]
    monkeypatch.setattr(note_source.aiohttp, "ClientSession", _session_factory(200, payload, requested))

    source = NoteSource("http://example.test/api/notes")
    notes = asyncio.run(source.fetch_notes())

    assert requested == ["http://example.test/api/notes"]
    assert [n.label for n in notes] == ["One", "Two"]


def test_fetch_notes_bad_status_returns_empty(monkeypatch):
    monkeypatch.setattr(note_source.aiohttp, "ClientSession", _session_factory(503, [], []))
    assert asyncio.run(NoteSource().fetch_notes()) == []


def test_fetch_notes_network_error_returns_empty(monkeypatch):
    class _BrokenSession:
        def __init__(self, *args, **kwargs):
            raise aiohttp.ClientConnectionError("down")

    monkeypatch.setattr(note_source.aiohttp, "ClientSession", _BrokenSession)
    assert asyncio.run(NoteSource().fetch_notes()) == []
