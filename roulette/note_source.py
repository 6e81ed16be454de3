"""
Note Source
"""

import aiohttp
import logging
from typing import Any, List

from .config_loader import DEFAULT_NOTES_URL
from .models import Note

logger = logging.getLogger(__name__)


class NoteSource:

    def __init__(self, url: str = DEFAULT_NOTES_URL, timeout: float = 10):
        self.url = url
        self.timeout = timeout

    async def fetch_notes(self) -> List[Note]:
        """Fetch the note list. Any failure is logged and yields an empty list."""
        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self.url) as response:
                    if response.status != 200:
                        logger.warning(f"❌ Notes API error: Status {response.status}")
                        return []
                    payload = await response.json(content_type=None)
        except aiohttp.ClientError as e:
            logger.error(f"❌ Notes API not reachable: {e}")
            return []
        except ValueError as e:
            logger.error(f"❌ Notes API returned invalid JSON: {e}")
            return []
        except Exception as e:
            logger.error(f"❌ Error fetching notes: {e}")
            return []

        notes = NoteSource.parse_notes(payload)
        logger.info(f"✅ Loaded {len(notes)} notes from {self.url}")
        return notes

    @staticmethod
    def parse_notes(payload: Any) -> List[Note]:
        if not isinstance(payload, list):
            logger.warning(f"Unexpected notes payload type: {type(payload).__name__}")
            return []

        notes = []
        seen = set()
        for entry in payload:
            if not isinstance(entry, dict):
                logger.warning(f"Skipping invalid note entry: {entry!r}")
                continue

            note_id = entry.get('_id', entry.get('id'))
            label = entry.get('title', entry.get('label'))
            detail = entry.get('description', entry.get('detail')) or ''

            if note_id is None or str(note_id) == '':
                logger.warning(f"Skipping note without id: {entry!r}")
                continue
            if not isinstance(label, str) or not label.strip():
                logger.warning(f"Skipping note {note_id} without title")
                continue

            note_id = str(note_id)
            if note_id in seen:
                logger.warning(f"Skipping duplicate note id {note_id}")
                continue
            seen.add(note_id)

            notes.append(Note(id=note_id, label=label.strip(), detail=str(detail)))

        return notes
