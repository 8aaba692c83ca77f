# enginetry

A small collection of game-engine building blocks, written in plain Python
with no third-party dependencies.

## Modules

- **`enginetry.helpers`**: memory-size helpers (`kilobytes`, `megabytes`,
  `gigabytes`, `terabytes`, each a multiple of 1024), an in-place
  `swap(items, i, j)` and `print_array(items, start, end, label)`, which prints
  `label: [ a b c ]` for the elements from `start` to `end` inclusive.
- **`enginetry.datastructures`**:
  - `Node` and a doubly linked `LinkedList` with `push_front`, iteration,
    `len()` and `forward_print` (prints the values and returns the printed line).
  - `node_forward(head, new_node)` appends a `Node` to the end of a chain and
    returns the head.
  - In-place sorting routines: `selection_sort` (prints the list after every
    swap), `desc_selection_sort`, `heap_sort` (prints the list once the heap is
    built), `desc_heap_sort`, `merge_sort(items, left_index, right_index)` with
    its `merge` step, and `quick_sort`, a three-way quick sort built on
    `partition`, which returns `(less, equal, greater)` around the first element.
    `heapify(items, heap_size, parent_index)` is available on its own too.
- **`enginetry.gamecode`**: a per-frame `game_update_and_render(memory,
  game_input, buffer, sound_buffer)`. It initialises the `GameState` held in
  `GameMemory` on the first call (tone 256 Hz, offsets 0), reads the first
  controller of `GameInput` (analogue stick Y changes the tone and blue offset;
  the `down` button lowers the blue offset, otherwise `up` lowers the green
  offset), fills the `SoundOutputBuffer` with an interleaved stereo sine tone
  via `output_sound`, and draws horizontal colour bands into the
  `OffscreenBuffer` via `render_gradient`. `OffscreenBuffer.pixel(x, y)` reads
  back a 32-bit pixel value.
- **`enginetry.wavefile`**: `parse_stereo_wave(data)` and
  `load_stereo_wave_file(path)` return a `WaveFormat` and the raw sample bytes.
  `WaveTrack.load(path, volume)` holds a loaded track with its volume;
  `release()` drops the data, and a `WaveTrack` works as a context manager that
  releases it on exit.

## Installing

```
pip install .
```

## Examples

Sorting (all routines sort the list in place and return `None`):

```python
from enginetry.datastructures import merge_sort, quick_sort

values = [5, 3, 5, 1]
quick_sort(values)
print(values)                    # [1, 3, 5, 5]

values = [67.23, 36.2, 89, 1, 37]
merge_sort(values, 0, len(values) - 1)
print(values)                    # [1, 36.2, 37, 67.23, 89]
```

Running one frame:

```python
from enginetry.gamecode import (
    GameInput, GameMemory, OffscreenBuffer, SoundOutputBuffer,
    game_update_and_render,
)

memory = GameMemory()
screen = OffscreenBuffer(width=64, height=32)
sound = SoundOutputBuffer(sample_count=800, samples_per_second=48000)
game_update_and_render(memory, GameInput(), screen, sound)
print(memory.state.tone_hz)      # 256
print(len(sound.samples))        # 1600
```

Loading a stereo WAVE file:

```python
from enginetry.wavefile import WaveTrack, WaveFormatError

try:
    with WaveTrack.load("music.wav", 0.5) as track:
        print(track.format.sample_rate, track.audio_bytes)
except WaveFormatError as exc:
    print("cannot use this file:", exc)
```

Only uncompressed PCM with two channels, a 48000 Hz sample rate and 16 bits per
sample is accepted; anything else, or a truncated file, raises
`WaveFormatError`.

## Command line

```
enginetry-sort-demo
```

Quick-sorts a fixed list of twelve numbers and prints them on one line,
each followed by a space: `1 2 2 3 4 4 5 5 6 8 10 48 `.

## What it does not do

There is no window, no audio device and no main loop. `game_update_and_render`
only fills the pixel and sample buffers it is given, and a `WaveTrack` only
holds the decoded data and volume; showing the picture or playing sound is
left to whatever code calls them.

## Running the tests

```
pip install .[test]
pytest
```