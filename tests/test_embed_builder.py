from roulette.layout_engine import compute_layout
from roulette.models import Note, WheelSnapshot
from tests.conftest import make_notes
from utils.embed_builder import EmbedBuilder


def test_loading_embed():
    embed = EmbedBuilder.create_loading_embed('en')
    assert embed.description == 'Loading notes...'


def test_wheel_embed_status_follows_spin_state():
    layout = compute_layout(make_notes(3))
    idle = EmbedBuilder.create_wheel_embed(WheelSnapshot(layout=layout), 'en', 'wheel.png')
    spinning = EmbedBuilder.create_wheel_embed(WheelSnapshot(layout=layout, is_spinning=True), 'es', 'wheel.gif')

    assert idle.description == 'Tap wheel to spin'
    assert idle.image.url == 'attachment://wheel.png'
    assert spinning.description == 'Girando...'
    assert spinning.footer.text == '3 notes'


def test_result_embed_shows_label_and_detail():
    embed = EmbedBuilder.create_result_embed(Note(id="1", label="Deploy", detail="Friday, sadly"), 'en')
    assert embed.title == '🏆 Result!'
    assert embed.fields[0].name == 'Deploy'
    assert embed.fields[0].value == 'Friday, sadly'


def test_note_list_truncates_labels():
    notes = [Note(id="1", label="An extremely long note title")]
    embed = EmbedBuilder.create_note_list_embed(notes, 'en')
    assert 'An extremely lo...' in embed.description
