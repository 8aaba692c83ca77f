"""Per-frame game update: controller input, a sine tone and a gradient render."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

PI32 = 3.14159265359
TONE_VOLUME = 3000
DEFAULT_TONE_HZ = 256
ANALOGUE_TONE_RANGE = 120
ANALOGUE_BLUE_SPEED = 4
PIXEL_SIZE = 4

_BUTTON_COUNT = 8
_CONTROLLER_COUNT = 4


@dataclass
class OffscreenBuffer:
    """Pixel memory drawn into before it is shown; 32-bit pixels as B, G, R, pad."""

    width: int
    height: int
    bytes_per_pixel: int = PIXEL_SIZE
    pitch: Optional[int] = None
    memory: bytearray = field(default_factory=bytearray, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("buffer dimensions must not be negative")
        if self.pitch is None:
            self.pitch = self.width * self.bytes_per_pixel
        needed = self.pitch * self.height
        if len(self.memory) < needed:
            self.memory.extend(bytes(needed - len(self.memory)))

    def pixel(self, x: int, y: int) -> int:
        """Return the 32-bit value stored for the pixel at column *x*, row *y*."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the buffer")
        offset = y * self.pitch + x * PIXEL_SIZE
        return int.from_bytes(self.memory[offset:offset + PIXEL_SIZE], "little")


@dataclass
class ButtonState:
    """How often a button changed during the frame and whether it ended held."""

    half_transition_count: int = 0
    ended_down: bool = False


def _named_button(index: int) -> property:
    def get(self: ControllerInput) -> ButtonState:
        return self.buttons[index]

    return property(get, doc=f"Button in slot {index}.")


@dataclass
class ControllerInput:
    """State of one controller: stick positions and eight buttons."""

    is_analogue: bool = False
    end_x: float = 0.0
    end_y: float = 0.0
    start_x: float = 0.0
    start_y: float = 0.0
    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0
    buttons: list[ButtonState] = field(
        default_factory=lambda: [ButtonState() for _ in range(_BUTTON_COUNT)]
    )

    def __post_init__(self) -> None:
        if len(self.buttons) != _BUTTON_COUNT:
            raise ValueError(f"a controller has exactly {_BUTTON_COUNT} buttons")

    up = _named_button(0)
    down = _named_button(1)
    left = _named_button(2)
    right = _named_button(3)
    left_shoulder = _named_button(4)
    right_shoulder = _named_button(5)
    right_stick = _named_button(6)
    left_stick = _named_button(7)


@dataclass
class GameInput:
    """Input for one frame from up to four controllers."""

    controllers: list[ControllerInput] = field(
        default_factory=lambda: [ControllerInput() for _ in range(_CONTROLLER_COUNT)]
    )


@dataclass
class GameState:
    """Game state that survives between frames."""

    tone_hz: int = 0
    green_offset: int = 0
    blue_offset: int = 0
    sine_phase: float = 0.0


@dataclass
class SoundOutputBuffer:
    """Interleaved 16-bit stereo samples to be filled for one frame."""

    sample_count: int
    samples_per_second: int
    samples: list[int] = field(default_factory=list, repr=False)


@dataclass
class GameMemory:
    """Storage handed to the game by the platform layer."""

    is_initialized: bool = False
    permanent_storage_size: int = 0
    transient_storage_size: int = 0
    state: GameState = field(default_factory=GameState)


def output_sound(
    sound_buffer: SoundOutputBuffer, tone_hz: int, phase: float = 0.0
) -> float:
    """Fill *sound_buffer* with a sine tone starting at *phase*; return the next phase.

    Both channels of each frame get the same sample.
    """
    wave_period = int(sound_buffer.samples_per_second / tone_hz)
    if wave_period == 0:
        raise ValueError("tone frequency is above the sample rate")
    step = 2.0 * PI32 / wave_period

    frames: list[int] = []
    for _ in range(sound_buffer.sample_count):
        value = int(math.sin(phase) * TONE_VOLUME)
        frames.extend((value, value))
        phase += step
    sound_buffer.samples[:len(frames)] = frames
    return phase


def render_gradient(buffer: OffscreenBuffer, blue_offset: int, green_offset: int) -> None:
    """Draw horizontal colour bands whose blue and green shift with the offsets."""
    buffer.bytes_per_pixel = PIXEL_SIZE
    row_size = buffer.width * PIXEL_SIZE
    if buffer.pitch < row_size:
        raise ValueError("pitch is smaller than one row of pixels")
    for y in range(buffer.height):
        pixel = bytes(((y + blue_offset) & 0xFF, (y + green_offset) & 0xFF, y & 0xFF, 0))
        start = y * buffer.pitch
        buffer.memory[start:start + row_size] = pixel * buffer.width


def game_update_and_render(
    memory: GameMemory,
    game_input: GameInput,
    buffer: OffscreenBuffer,
    sound_buffer: SoundOutputBuffer,
) -> None:
    """Advance the game by one frame, then produce its sound and picture."""
    state = memory.state
    controller = game_input.controllers[0]

    if not memory.is_initialized:
        state.tone_hz = DEFAULT_TONE_HZ
        state.green_offset = 0
        state.blue_offset = 0
        memory.is_initialized = True

    if controller.is_analogue:
        state.tone_hz = int(DEFAULT_TONE_HZ + ANALOGUE_TONE_RANGE * controller.end_y)
        state.blue_offset = int(state.blue_offset + ANALOGUE_BLUE_SPEED * controller.end_y)

    if controller.down.ended_down:
        state.blue_offset -= 1
    elif controller.up.ended_down:
        state.green_offset -= 1

    state.sine_phase = output_sound(sound_buffer, state.tone_hz, state.sine_phase)
    render_gradient(buffer, state.blue_offset, state.green_offset)