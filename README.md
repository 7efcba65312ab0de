# abyss

Core building blocks of a small application engine, together with two
command-line tools.

## What is inside

- `abyss.common`: `AppInfo`, `AppVersion`, `EBackend`, `ECursor`, the 64-bit
  `UUID` (drawn from a process-wide seeded generator), and `map_vector`, which
  groups items by key with keys in sorted order.
- `abyss.timing`: `Time`, a value in seconds with `sec()`, `milli()`,
  `micro()` and `nano()`, and `Timer`, with `reset()` and `elapsed()`.
- `abyss.log`: `Logger`, with `log`, `warn`, `error`, `assert_` and `debug`
  methods, ANSI colours, optional buffering (released by `flush()`) and
  callbacks registered with `add_callback` / `remove_callback`. Both streams
  default to standard error. `format_vec` prints vectors as `(a, b, ...)`.
- `abyss.events`: key, mouse and window events (`KeyPressedEvent`,
  `MouseMovedEvent`, `WindowResizeEvent` and others), the `Key`,
  `MouseButton` and `Mod` codes, and `EventDispatcher`, which routes an event
  to a callback bound for its class and records the result in `handled`.
- `abyss.resources`: `ResourceClass`, a handle-based store whose freed handles
  are reused, with `ResourceHandler` hooks called on add and erase.
- `abyss.serialize`: `Serializer`, an in-memory binary reader and writer for
  length-prefixed strings, C strings and packed structs; it raises
  `SerializeError` on a mode mismatch or a read past the end.
- `abyss.vertex`: `Vertex`, `Triangle`, `Quad` and `Text` records.
- `abyss.shader_layout`: `ShaderDescriptor` with its uniforms, storages,
  samplers and inputs, `VkFormat`, and `VertexClass`, the vertex size of one
  input binding.
- `abyss.vertex_buffer`: `VertexAccumulator`, which packs fixed-size vertices
  into a batch (`store`, `advance`, `reset`) and raises
  `VertexAccumulatorFull` when it needs flushing.
- `abyss.ui`: layout enums and style records for widgets.

## Example

```python
from abyss.events import EventDispatcher, Key, KeyPressedEvent, Mod

event = KeyPressedEvent(Key.A, 0, Mod.NONE)
dispatcher = EventDispatcher(event)
dispatcher.bind(KeyPressedEvent, lambda e: True)
assert event.handled
```

## Tools

Collect the strings passed to `Text("...")` from the `.h`, `.hpp`, `.c`,
`.cpp` and `.cxx` files under `<project>/Source` and write them, after a
`Locale:` header line, to `./Out.txt`. Options are lower-cased; the locale
defaults to `EN-US`:

```
abyss-localize <project_root_dir> --get-text --locale=en-gb
```

Wait until a process exits, given its pid or its name, then run a command in
the shell:

```
abyss-watchdog <pid or process name> <command> [args...]
```

## What it does not do

The package holds data types, event routing, logging, storage of in-memory
resources and CPU-side vertex packing. It opens no window, draws nothing on
the GPU, loads no shaders, textures or fonts from disk, and has no widgets or
application loop that would use the `abyss.ui` records.

## Tests

```
pip install -e .[test]
pytest
```