# speciesnet

Building blocks for the detector stage of a camera-trap pipeline: loading
images, letterboxing them into a model-ready tensor, filtering raw YOLO-style
output with non-max suppression, mapping boxes back onto the original image,
and the detection and instance types used in the JSON files between stages.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Preparing an image

```python
from speciesnet.letterbox import preprocess

image = preprocess("photos/deer.jpg")
tensor = image.to_tensor()   # float32, shape (1, 3, height, width), values in 0..1
print(image.original_size, image.resized_size)
```

`preprocess` loads the file with `speciesnet.image_reader.load_image` and
letterboxes it to a 1280 x 1280 target. For other targets call
`speciesnet.letterbox.letterbox(image, options)` on a Pillow image with a
`LetterboxOptions`:

| field        | default                | meaning                                             |
|--------------|------------------------|-----------------------------------------------------|
| `shape`      | `Shape.square(640)`    | target size (`speciesnet.shape.Shape`)              |
| `scale_up`   | `True`                 | allow enlarging images smaller than the target      |
| `auto`       | `True`                 | pad only up to the next multiple of `stride`        |
| `stride`     | `64`                   | stride used when `auto` is set                      |
| `scale_fill` | `False`                | stretch to the target without padding (when not `auto`) |
| `color`      | `(114, 114, 114)`      | padding colour                                      |

The result, a `LetterboxResult`, holds the image, its original size and its
final size.

`load_image` returns an RGB Pillow image. Files ending in `.jpg` or `.jpeg`
must contain JPEG data; other files are decoded by their contents. A path
without an extension, or data that cannot be decoded, raises
`speciesnet.errors.ImageLoadError`; a missing file raises `FileNotFoundError`.

## Filtering detector output

```python
from speciesnet.bounding_box import BoundingBox
from speciesnet.category import Category
from speciesnet.detection import Detection
from speciesnet.yolo import non_max_suppression

# `output` is the model's raw output, shape (1, N, 8):
# centre x, centre y, width, height, objectness, then three class scores.
rows = non_max_suppression(output, 0.01)

(orig_w, orig_h), (res_w, res_h) = image.original_size, image.resized_size
detections = [
    Detection(
        Category.from_number(int(row[5]) + 1),
        float(row[4]),
        BoundingBox(*map(float, row[:4]))
        .scale_to(res_w, res_h, orig_w, orig_h)
        .normalize(orig_w, orig_h),
    )
    for row in rows
]
```

`non_max_suppression` returns rows of `(x1, y1, x2, y2, confidence, class)`,
highest confidence first and at most 300 of them; when nothing passes the
threshold it returns an array with no rows. A threshold outside `[0, 1)` or
`None` means the default of 0.25. The lower-level pieces are also available:
`speciesnet.yolo.xywh_to_xyxy`, and `speciesnet.nms.nms` and
`speciesnet.nms.iou` for plain non-max suppression over `(x1, y1, x2, y2)`
boxes.

## Types and JSON

- `BoundingBox` stores `(x1, y1, x2, y2)`. In JSON it is written and read as
  `[min_x, min_y, width, height]` (`to_json` / `from_json`); it can also be
  built from centre coordinates, from megadetector coordinates, or from
  four-value tensors.
- `Category` is `ANIMAL`, `HUMAN` or `VEHICLE`, with indices `"1"`, `"2"`,
  `"3"`. `Category.parse` reads text, `Category.from_number` reads 1, 2 or 3.
- `Detection.to_json()` gives `{"category", "label", "conf", "bbox"}`;
  `Detection.from_json` reads `category`, `conf` and `bbox`.
- `speciesnet.instance.Instances.load(path)` reads an instances file: an
  object whose `instances` array holds `filepath` and optional `country`
  and `admin1_region`.
- `speciesnet.constants` holds the blank, animal, human, vehicle and unknown
  labels and the model input sizes.

Errors raised by the package derive from `speciesnet.errors.SpeciesNetError`.

## What this package does not do

- It does not run any model; you supply the detector's output array.
- It has no classifier stage: no cropping to 480 x 480, no softmax or top-5
  label selection, and no label-file reading.
- It has no type for a whole prediction record and does not read or write
  prediction output files.
- It has no command-line tool.