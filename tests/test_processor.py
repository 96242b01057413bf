from therum.params import ParamId
from therum.processor import MidiKind, MidiMessage, TherumProcessor


def _prepared():
    proc = TherumProcessor()
    proc.prepare_to_play(44100.0, 512)
    return proc


def test_unprepared_processor_renders_silence():
    out = TherumProcessor().process_block(64, 2)
    assert len(out) == 2
    assert all(len(ch) == 64 for ch in out)
    assert all(s == 0.0 for ch in out for s in ch)


def test_prepare_creates_sixteen_voices():
    proc = _prepared()
    assert len(proc.voice_manager.pool) == 16


def test_note_on_produces_identical_channels():
    proc = _prepared()
    out = proc.process_block(256, 2, [MidiMessage.note_on(69, 1.0)])
    assert out[0] == out[1]
    assert any(s != 0.0 for s in out[0])
    assert proc.diagnostics.active_voices == 1


def test_note_off_releases_voice():
    proc = _prepared()
    proc.process_block(16, 1, [MidiMessage.note_on(60, 1.0)])
    proc.process_block(16, 1, [MidiMessage.note_off(60)])
    assert proc.voice_manager.active_voice_count == 0


def test_zero_velocity_note_on_is_note_off():
    proc = _prepared()
    proc.process_block(16, 1, [MidiMessage.note_on(60, 1.0)])
    proc.process_block(16, 1, [MidiMessage.note_on(60, 0.0)])
    assert proc.voice_manager.active_voice_count == 0


def test_all_notes_off_and_all_sound_off():
    proc = _prepared()
    notes = [MidiMessage.note_on(n, 1.0) for n in (60, 64, 67)]
    proc.process_block(8, 1, notes)
    assert proc.voice_manager.active_voice_count == 3
    proc.process_block(8, 1, [MidiMessage(MidiKind.ALL_NOTES_OFF)])
    assert proc.voice_manager.active_voice_count == 0
    proc.process_block(8, 1, [MidiMessage.note_on(60, 1.0)])
    proc.process_block(8, 1, [MidiMessage(MidiKind.ALL_SOUND_OFF)])
    assert proc.voice_manager.active_voice_count == 0


def test_other_messages_are_ignored():
    proc = _prepared()
    proc.process_block(8, 1, [MidiMessage.note_on(60, 1.0), MidiMessage(MidiKind.OTHER)])
    assert proc.voice_manager.active_voice_count == 1


def test_lower_master_gain_is_quieter():
    loud, quiet = _prepared(), _prepared()
    quiet.parameters[ParamId.MASTER_GAIN] = -48.0
    msgs = [MidiMessage.note_on(69, 1.0)]
    a = loud.process_block(512, 1, msgs)[0]
    b = quiet.process_block(512, 1, msgs)[0]
    assert max(abs(s) for s in b) < max(abs(s) for s in a)


def test_state_round_trip():
    proc = TherumProcessor()
    proc.parameters[ParamId.MACRO1] = 0.3
    proc.parameters[ParamId.QUALITY_MODE] = 2
    other = TherumProcessor()
    other.set_state_information(proc.get_state_information())
    assert other.parameters[ParamId.MACRO1] == 0.3
    assert other.diagnostics.quality_mode_index == 2


def test_garbage_state_is_ignored():
    proc = TherumProcessor()
    proc.parameters[ParamId.MACRO2] = 0.7
    proc.set_state_information(b"\x00not xml")
    assert proc.parameters[ParamId.MACRO2] == 0.7


def test_processor_name():
    assert TherumProcessor().name == "THERUM"