# ticklekit

Building blocks for an emulator front end, in plain Python with no
third-party dependencies.

## Modules

- `ticklekit.dataio` – byte streams sharing the `DataIO` interface
  (`read`, `write`, `seek`, `tell`, `close`, `read_ptr`): `FileIO` over a
  file on disk and `MemFileIO` over a caller-supplied buffer that never
  grows. Also `read_file`, `write_file` and `file_exists`.
- `ticklekit.pathext` – `get_extension` returns a path's extension with its
  dot; `PathExtRegistry` maps up to 16 extensions, case-insensitively, to a
  kind and `resolve` returns `(kind, path_without_extension)`.
- `ticklekit.pixelformat` – `PixelFormatKind`, the frozen `PixelFormat`
  layout description and `get_pixel_format`.
- `ticklekit.surface` – `Surface`, a line-addressed pixel buffer that either
  borrows memory (`set`) or owns it (`alloc`).
- `ticklekit.rendersurface` – `RenderSurface` renders 8-bit indexed lines
  through a colour lookup table; `convert_palette` packs colours into a
  pixel format.
- `ticklekit.texture` – `Texture.create`, `texture_log2` and `texture_bytes`
  for power-of-two texture bookkeeping.
- `ticklekit.vram` – `VramAllocator`, a bump allocator handing out
  `VramBlock`s; space is only returned by `reset`.
- `ticklekit.memspace` – `MemSpace`, a fixed-size byte region that can be
  filled from or written to a stream and snapshotted with
  `save_state`/`restore_state`.
- `ticklekit.font` – `Font.from_surface` cuts glyphs out of a 32-bit sheet;
  `string_width` measures text and `glyph_positions` lays it out.
- `ticklekit.bmpfile` – `read_bmp` and `write_bmp` for uncompressed 8, 16,
  24 and 32-bit images; errors raise `BmpError`.
- `ticklekit.mixbuffer`, `ticklekit.wavfile`, `ticklekit.sjpcmbuffer` – the
  `MixBuffer` audio sink interface; `WavFile` records 16-bit PCM to a WAVE
  file; `SjpcmMixBuffer` feeds an in-memory 48 kHz `PcmSink`, resampling
  32 kHz input with `convert_samples_2to3`.
- `ticklekit.proflog`, `ticklekit.prof` – `ProfLog` of begin/end marks with
  a `report` of per-section totals and averages; `Profiler` records marks
  each frame and reports after `start_profile(frames)` frames.
- `ticklekit.debuglog` – `DebugTerminal`, a ring buffer of the last 64 log
  lines plus the last phase reached; `panic` raises `DebugPanic`.
- `ticklekit.emusys`, `ticklekit.emurom` – the `System` and `Rom` base
  classes. `Rom.load_rom` raises `RomLoadError` in the base class.
- `ticklekit.emumovie` – `MovieClip` records per-frame input from a saved
  starting state and plays it back.
- `ticklekit.emushell` – `EmuShell` registers systems, finds one by file
  extension and loads a cartridge file into the first registered system;
  helpers `rom_display_name`, `name_hash`, `truncate_save_name` and
  `read_file_data` (plain or gzip).
- `ticklekit.ui_screen`, `ticklekit.ui_menu`, `ticklekit.ui_log`,
  `ticklekit.ui_browser`, `ticklekit.ui_network` – controller-driven screen
  state: `Screen` with `PadButton` flags, `MenuScreen`, `LogScreen`,
  `BrowserScreen` (directory listing with copy, paste and delete through a
  `LocalFileSystem` or any object with the same methods) and
  `NetworkScreen` (address editing and host/connect choices).

## Example

```python
from ticklekit.dataio import MemFileIO
from ticklekit.pathext import get_extension

stream = MemFileIO()
stream.open(bytearray(b"hello world"))
print(stream.read(5))                    # b'hello'

print(get_extension("games/mario.smc"))  # '.smc'
```

## What it does not do

- There is no emulator core: `System` has no state of its own and `Rom`
  accepts no format; concrete systems and cartridge formats are expected to
  subclass them.
- Nothing is drawn. The screens keep selection, scrolling and text state and
  report events through a message callback; rendering them is left to the
  caller. `Font` computes glyph rectangles and positions but does not
  rasterise text.
- `NetworkScreen` does no networking; hosting and connecting are only
  messages sent to its callback. Likewise `PcmSink` is an in-memory queue,
  not an audio device.
- There is no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```