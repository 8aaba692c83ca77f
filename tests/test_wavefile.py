import struct

import pytest

from enginetry.wavefile import (
    REQUIRED_SAMPLE_RATE,
    WaveFormat,
    WaveFormatError,
    WaveTrack,
    load_stereo_wave_file,
    parse_stereo_wave,
)

SAMPLES = bytes(range(32))


def _chunk(chunk_id, payload):
    return chunk_id + struct.pack("<I", len(payload)) + payload


def _fmt(tag=1, channels=2, rate=48000, bits=16, extra=b""):
    block = bits // 8 * channels
    body = struct.pack("<HHIIHH", tag, channels, rate, rate * block, block, bits)
    return _chunk(b"fmt ", body + extra)


def _wave(*chunks, riff=b"RIFF", form=b"WAVE"):
    body = form + b"".join(chunks)
    return riff + struct.pack("<I", len(body)) + body


def _good():
    return _wave(_fmt(), _chunk(b"data", SAMPLES))


def test_parse_returns_samples_and_format():
    wave_format, samples = parse_stereo_wave(_good())
    assert samples == SAMPLES
    assert wave_format == WaveFormat(2, REQUIRED_SAMPLE_RATE, 16)


def test_format_derived_sizes():
    wave_format, _ = parse_stereo_wave(_good())
    assert wave_format.block_align == 4
    assert wave_format.avg_bytes_per_second == wave_format.sample_rate * wave_format.block_align


def test_skips_chunks_before_format_and_data():
    data = _wave(
        _chunk(b"JUNK", b"\x01\x02\x03"),
        _fmt(),
        _chunk(b"LIST", b"info"),
        _chunk(b"data", SAMPLES),
    )
    _, samples = parse_stereo_wave(data)
    assert samples == SAMPLES


def test_format_chunk_with_extension_is_skipped():
    data = _wave(_fmt(extra=b"\x00\x00"), _chunk(b"data", SAMPLES))
    _, samples = parse_stereo_wave(data)
    assert samples == SAMPLES


def test_empty_data_chunk():
    _, samples = parse_stereo_wave(_wave(_fmt(), _chunk(b"data", b"")))
    assert samples == b""


@pytest.mark.parametrize(
    "data",
    [
        _wave(_fmt(), _chunk(b"data", SAMPLES), riff=b"RIFX"),
        _wave(_fmt(), _chunk(b"data", SAMPLES), form=b"AVI "),
        _wave(_fmt(tag=3), _chunk(b"data", SAMPLES)),
        _wave(_fmt(channels=1), _chunk(b"data", SAMPLES)),
        _wave(_fmt(rate=44100), _chunk(b"data", SAMPLES)),
        _wave(_fmt(bits=8), _chunk(b"data", SAMPLES)),
        _wave(_fmt()),
        _wave(_chunk(b"data", SAMPLES)),
        b"RIFF",
        b"",
    ],
)
def test_rejects_unsupported_or_broken_files(data):
    with pytest.raises(WaveFormatError):
        parse_stereo_wave(data)


def test_truncated_data_chunk_raises():
    data = _wave(_fmt(), _chunk(b"data", SAMPLES))[:-1]
    with pytest.raises(WaveFormatError, match="data"):
        parse_stereo_wave(data)


def test_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_stereo_wave(b"nonsense but long enough")


def test_load_file(tmp_path):
    path = tmp_path / "tone.wav"
    path.write_bytes(_good())
    wave_format, samples = load_stereo_wave_file(path)
    assert samples == SAMPLES
    assert wave_format.channels == 2


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_stereo_wave_file(tmp_path / "missing.wav")


def test_track_load_and_release(tmp_path):
    path = tmp_path / "tone.wav"
    path.write_bytes(_good())
    track = WaveTrack.load(path, 0.25)
    assert track.volume == 0.25
    assert track.looping is True
    assert track.audio_bytes == len(SAMPLES)
    track.release()
    assert track.released is True
    assert track.audio_bytes == 0
    track.release()
    assert track.data is None


def test_track_context_releases(tmp_path):
    path = tmp_path / "tone.wav"
    path.write_bytes(_good())
    with WaveTrack.load(path) as track:
        assert track.data == SAMPLES
    assert track.released is True


def test_track_load_rejects_bad_file(tmp_path):
    path = tmp_path / "mono.wav"
    path.write_bytes(_wave(_fmt(channels=1), _chunk(b"data", SAMPLES)))
    with pytest.raises(WaveFormatError):
        WaveTrack.load(path, 1.0)