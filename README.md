# pathtracer

A small path tracer. It reads a scene made of spheres, triangles and
cuboids from three INI files, traces a number of randomly bouncing rays per
pixel, sharing the image rows between worker threads, and writes the result
as a 32-bit BMP image.

It has no dependencies beyond the Python standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Rendering a scene

Put the three configuration files in the current directory and run:

```
pathtracer
```

or point the command at another directory:

```
pathtracer --config-dir path/to/scene
```

The program prints the scene setup, reports progress while rendering, saves
the image (when `StoreResultToFile` is `true`) and finally prints how long
the ray simulation, the BMP writing and the whole run took. If any file is
missing or holds invalid values, it prints which one and exits with status 1.

### `scene_config.ini`

Lines starting with `[` are section headers and are ignored. Every other
line is `Key = Value`; lines without a value are skipped.

Required keys:

| Key | Meaning |
| --- | --- |
| `WindowTitle` | Name shown in the setup summary |
| `Width` | Image width in pixels |
| `AspectRatio` | Width divided by height; the height is derived from it |
| `NumRays` | Rays traced per pixel |
| `NumBounces` | Maximum bounces per ray |
| `ContributionPerBounce` | How much each bounce's colour carries forward |
| `FieldOfView` | Horizontal field of view in degrees (an integer) |
| `HorizontalRotation` | Camera yaw in radians |
| `VerticalRotation` | Camera pitch in radians |
| `CameraRotation` | Camera roll in radians |
| `CameraOffset_X`, `CameraOffset_Y`, `CameraOffset_Z` | Camera position |
| `PrintPercentStatusEvery` | Progress report interval in percent |
| `StoreResultToFile` | `true` or `false` |

Optional keys:

| Key | Meaning |
| --- | --- |
| `NumThreads` | Worker threads; if missing or 0, the number of CPUs |
| `RandomSeed` | Integer seed for reproducible renders; random otherwise |
| `FileName` | Output name without extension; otherwise `OutputScene_<n>` with a random `<n>` from 1 to 999999 |

The image is written to `<name>.bmp`. Numbers are read from the start of a
value and anything after them is ignored; an unreadable `RandomSeed` or
`NumThreads` is ignored.

### `colour_data.ini`

Each line names a material and gives eight numbers separated by spaces:

```
[Colours]
white = 1.0 1.0 1.0 0.0 0.0 0.0 0.0 0.0
lamp  = 1.0 1.0 1.0 1.0 1.0 1.0 4.0 0.0
glossy_red = 0.9 0.1 0.1 0.0 0.0 0.0 0.0 0.8
```

The values are: surface colour R, G, B; emitted colour R, G, B; emission
strength; specularity (0 is fully diffuse, 1 a perfect mirror). A value that
is not a number is read as -1.0; a line without exactly eight values is an
error.

### `object_config.ini`

A sphere fits on one line: the word `sphere`, its centre, its radius and a
colour name.

```
sphere 0.0 0.0 10.0 2.0 glossy_red
```

A triangle is the word `triangle` followed by three lines of corner
coordinates and one line with a colour name:

```
triangle
-5.0 -5.0 12.0
5.0 -5.0 12.0
0.0 5.0 12.0
white
```

A cuboid is the word `cuboid` followed by eight corner lines and six lines
each naming two colours, one for each triangle of a face:

```
cuboid
-1 -1 -1
1 -1 -1
1 -1 1
-1 -1 1
-1 1 -1
1 1 -1
1 1 1
-1 1 1
white white
white white
white white
white white
lamp lamp
white white
```

The corners are given left-down-back, right-down-back, right-down-front,
left-down-front, then the same four on the upper face. The colour pairs are
for the down, left, right, back, front and up faces in that order. The down
pair must name known colours but is not used: the down face takes the back
face's colours.

Every colour named must be defined in `colour_data.ini`.

## Using the library

The building blocks can be used on their own. Vectors are plain tuples of
numbers, and a ray is an `(origin, direction)` pair.

```python
from pathtracer.geometry import Sphere

colour = (0.0,) * 8
sphere = Sphere((0.0, 40.0, 40.0), 50.0, colour)

hit = sphere.check_intersection(((-1000.0, 30.0, 50.0), (1.0, 0.0, 0.0)))
print(hit.intersects, hit.lam, hit.point_of_intersection)
```

`check_intersection` returns an `IntersectionData` with `intersects`, `lam`
(the ray parameter of the hit, -1.0 on a miss), `normal`,
`point_of_intersection` and `colour`.

```python
from pathtracer import vectors

vectors.dot((1.0, 2.0, 3.0), (4.0, 5.0, 6.0))   # 32.0
vectors.magnitude((3.0, 4.0))                   # 5.0
vectors.normalise((3.0, 4.0))                   # (0.6, 0.8)
```

Writing an image from an RGBA pixel buffer, rows from the top down:

```python
from pathtracer.bmp import write_bmp

width, height = 2, 1
pixels = bytes([255, 0, 0, 255, 0, 0, 255, 255])
write_bmp("two_pixels.bmp", pixels, width, height)
```

`encode_bmp` returns the same file contents as bytes without writing them.

The modules are:

- `pathtracer.vectors` – vector arithmetic, lines and planes
- `pathtracer.colour` – per-ray colour accumulation (`ColourData`) and
  tone-mapped averaging (`average_of_colours`)
- `pathtracer.geometry` – `Sphere` and `Triangle` intersection
- `pathtracer.camera` – `Camera`, a pinhole camera with per-pixel ray directions
- `pathtracer.raylogic` – diffuse/specular bounce direction
- `pathtracer.scene_objects` – `SceneObjects`, the shapes in a scene
- `pathtracer.scene_config` – `SceneConfig`, the settings of one render
- `pathtracer.file_reader`, `pathtracer.config_reader`,
  `pathtracer.colour_reader`, `pathtracer.object_reader` – reading the INI
  files; problems raise `ConfigError`
- `pathtracer.render` – `render` and `partition_rows`
- `pathtracer.timer` – `Timer` and timing log lines
- `pathtracer.bmp` – BMP encoding and writing
- `pathtracer.cli` – the `pathtracer` command

## What it does not do

The result is only written to a BMP file; nothing is shown on screen, and
the `display_result_on_screen` setting is not used. Rendering runs in Python
threads, so extra threads do not make it faster on CPU-bound work.