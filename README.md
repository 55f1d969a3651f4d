# mengine_core

This package is the data and scheduling layer of a small real-time renderer.
It covers the parts that sit above the graphics API: identifiers, entities
and their JSON form, in-memory repositories, and a worker-thread task
scheduler.

## Modules

- **`mengine_core.ring_buffer`**: `RingBuffer` is a fixed-capacity FIFO.
  - `push` raises `OverflowError` when the buffer is full.
  - `push_overwrite` drops the oldest item instead.
  - `pop` and `front` raise `IndexError` when the buffer is empty.
  - A capacity below 1 raises `ValueError`.
- **`mengine_core.identifiers`**: `UUID` is a frozen 128-bit identifier with
  `high` and `low` 64-bit halves.
  - `UUID.parse` reads the `xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx` form and
    ignores hyphens.
  - Empty text, or text without exactly 32 digits, gives the empty
    (all-zero) identifier.
  - `str()` of the empty identifier is `""`.
  - Identifiers are ordered and hashable.
  - `UUIDGenerator()()` returns a random version-4 identifier. The generator
    takes an optional `random.Random`.
- **`mengine_core.task_scheduler`**: `Task`, `when_all` and `TaskScheduler`.
  - `TaskScheduler.instance()` is one scheduler for the whole process. It is
    shut down at interpreter exit.
  - `initialize(thread_count, task_count)` starts the workers. `add_task`
    blocks while the queue holds `task_count` tasks.
  - `add_task` raises `RuntimeError` before `initialize` or after
    `shutdown`.
  - An exception inside a task is swallowed, and the task still counts as
    done.
- **`mengine_core.settings`**: `WindowConfig` and `PoolSizesProportion`.
  - `WindowConfig.from_json` reads `Width`, `Height` and `Title`. Keys that
    are missing come from `defaults`.
  - It raises `ValueError` for a size that is not positive or an empty
    title.
  - `PoolSizesProportion.from_json` reads entries like
    `{"type": "eUniformBuffer", "value": 2.0}`.
  - `PoolSizesProportion.to_json` writes the type names without the leading
    `e`, for example `"UniformBuffer"`. Its output therefore cannot be read
    back by `from_json`.
  - `DescriptorType` lists the descriptor kinds.
- **`mengine_core.entity`**: `Entity` has an `id` (a fresh random `UUID`
  unless one is given) and a `name`. It also has `to_json` and `load_json`.
- **`mengine_core.light`**: `LightType`, `Light` and `DirectionalLight`.
  - `DirectionalLight` refuses any other type with `ValueError`.
  - The JSON form adds `Type`, `Color` and `Intensity`.
  - `Light.from_json(light.to_json())` rebuilds an equal light.
- **`mengine_core.material`**: `RenderType`, `TextureSlot`, `PBRParameters`,
  `PBRTextureFlags`, `PBRParams` and `PBRMaterial`.
  - `PBRParams.pack()` returns the 64-byte little-endian uniform-buffer
    layout.
  - `PBRMaterial.set_texture_id` sets a slot and switches its flag on, or
    off for the empty identifier.
- **`mengine_core.texture`**: `Texture2D` holds `image_path`, `width`,
  `height`, `channels` and RGBA `pixels`. Its JSON form carries `imagePath`,
  `width`, `height` and `channels`.
- **`mengine_core.repository`**: `Repository` is the abstract base. Its
  methods are `create`, `get`, `get_all`, `get_by_name`, `update`, `delete`,
  `save_to_file`, `load_from_file`, `check_path`, `check_entity`, `len()`
  and `in`.
  - `update` raises `ValueError` for an unacceptable delta and `KeyError`
    for an unknown identifier.
  - `delete` raises `KeyError` for an unknown identifier.
  - `save_to_file` and `load_from_file` raise `ValueError` when `check_path`
    rejects the path. Both repositories below accept only files that
    **already exist**.
- **`mengine_core.texture_repository`**: `Texture2DRepository` and
  `checker_board(width, height, grid)`.
  - The repository always holds a 4096×4096 RGBA checker-board texture
    under the empty `UUID`.
  - `create()` stores another checker-board texture.
  - `update(id, delta)` loads `delta.image_path` with Pillow. The path must
    be an existing `.png` file. The image is converted to RGBA and flipped
    so that its bottom row comes first.
- **`mengine_core.material_repository`**: `PBRMaterialRepository(textures)`.
  - `update` copies render type, parameters and texture slots, and
    recomputes the flags. Every referenced texture must exist in the texture
    repository, and an empty id resolves to the default.
  - `uniform_data(id)` returns the packed parameters.
  - `texture_bindings(id)` maps descriptor bindings 1–5 (`TEXTURE_BINDINGS`)
    to `Texture2D` objects.
  - `check_path` accepts existing `.mat` files.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from mengine_core.ring_buffer import RingBuffer

buf = RingBuffer(3)
for frame_time in (16.6, 16.7, 17.1, 16.9):
    buf.push_overwrite(frame_time)
list(buf)        # [16.7, 17.1, 16.9]
buf.pop()        # 16.7
```

```python
from mengine_core.identifiers import UUID, UUIDGenerator

new_id = UUIDGenerator()()
assert UUID.parse(str(new_id)) == new_id
assert UUID.parse("").is_empty()
```

```python
from mengine_core.task_scheduler import Task, TaskScheduler, when_all

scheduler = TaskScheduler.instance()
scheduler.initialize(4, 64)
tasks = [Task.run(lambda: None) for _ in range(10)]
when_all(tasks)
scheduler.shutdown()
```

```python
from mengine_core.light import DirectionalLight, Light

sun = DirectionalLight((1.0, 0.9, 0.8), 2.0)
copy = Light.from_json(sun.to_json())
assert copy.id == sun.id and copy.intensity == 2.0
```

```python
from pathlib import Path

from mengine_core.material import TextureSlot
from mengine_core.material_repository import PBRMaterialRepository
from mengine_core.texture import Texture2D
from mengine_core.texture_repository import Texture2DRepository

textures = Texture2DRepository()
materials = PBRMaterialRepository(textures)

brick = textures.create()
delta = Texture2D()
delta.image_path = Path("brick.png")      # an existing PNG file
textures.update(brick.id, delta)

material = materials.create()
material.set_texture_id(TextureSlot.ALBEDO, brick.id)
len(materials.uniform_data(material.id))  # 64

path = Path("brick.mat")
path.touch()                              # the target file must exist
materials.save_to_file(path, material)
```

## What this package does not do

- It does not create GPU buffers, images, samplers or descriptor sets, and
  it opens no window. `uniform_data` and `texture_bindings` give the data a
  renderer would upload and bind.
- `PBRMaterial.to_json` writes the entity fields, `RenderType` and a
  `Textures` object keyed by slot name. `PBRMaterial.from_json`, and so
  `PBRMaterialRepository.load_from_file`, expect more than that:
  `Albedo`, `Metallic`, `Roughness`, `AO`, `Emissive`, and `Textures` entries
  that are objects with `Type` and `ID`. A saved material therefore cannot be
  loaded back as it stands.
- `save_to_file` does not create files. It writes only to a path that
  `check_path` accepts, and that path must already exist.

## Supported Python

Python 3.10 and later.