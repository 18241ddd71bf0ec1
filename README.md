# tm25rays

Building blocks for optical ray data as used in illumination design. The
package covers the TM-25 ray file header and its consistency check, the layout
of the items (columns) a ray set holds, a row-major ray array, a Sobol
quasi-random sequence, and a few text and output helpers.

## Installation

```
pip install tm25rays
```

The package has no dependencies outside the standard library.

## Modules

- `tm25rays.header`: `TM25Header`, a dataclass with every TM-25 header field
  (version, fluxes, number of rays, spectrum type, wavelengths, data flags,
  descriptive texts, spectral tables, additional column names);
  `SpectralTable`; and `TM25Header.sanity_check()`, which returns a
  `SanityCheck` with `msg`, `fatal_errors` and `nonfatal_errors`.
- `tm25rays.items`: `RayItem` (the standard ray items `X` … `SPECTRUM_IDX`,
  plus `ADDITIONAL`), `ray_item_to_string` / `string_to_ray_item`, and
  `RaySetItems`, which says which items a ray set holds. `RaySetItems.from_header`
  derives the layout from a header's flags and column names. `extraction_map`
  gives the column indices of another layout's items, and `item_indices` gives
  the column of each standard item, or `ABSENT`. Errors are raised as `TM25Error`.
- `tm25rays.rayset`: `RayArray`, single precision ray data with one row per ray
  and one column per item. It offers `set_ray`, `set_item`, `set_ray_item`,
  `get_ray`, `bounding_box`, `shuffle`, `total_ray_power`, `set_data_direct`,
  `extract_data` and `change_microns_to_nanometers`. `TM25RaySet` pairs a
  header with a ray array and keeps the item layout the header implies.
- `tm25rays.sobol`: `Sobol(dim)`, a Sobol sequence for 1 to 6 dimensions.
  Each call returns the next point, with coordinates in (0, 1).
- `tm25rays.parse_string`: `split_string`, `string_to_vector`,
  `string_to_array` and `char_range_to_double`. These split delimited text and
  convert the pieces to floats.
- `tm25rays.util`: `null_terminated`, `narrow`, `trim_white_space`,
  `tokenize` and `index_sort`.
- `tm25rays.timer`: `Timer` (`tic`, `toc`, `elapsed`) and
  `current_iso8601_time_utc()`.
- `tm25rays.log`: `ComposeStream`, which writes to several streams at once;
  `LogPlusCout`, which sends output to standard output, a log file, or both; and
  `ThreadSafeStdout`.

## Examples

```python
from tm25rays.header import TM25Header
from tm25rays.rayset import RayArray, TM25RaySet

header = TM25Header(n_rays=2, spectrum_type=0)
rays = RayArray(2, 7, [0, 0, 0, 0, 0, 1, 1.0,
                       1, 2, 3, 0, 0, 1, 0.5])
ray_set = TM25RaySet(header, rays)

print(ray_set.n_rays(), ray_set.n_items())   # 2 7
print(rays.total_ray_power())                # 1.5
print(rays.bounding_box())                   # ((0.0, 0.0, 0.0), (1.0, 2.0, 3.0))
print(ray_set.items.item_name(6))            # phi

check = header.sanity_check()
print(check.fatal_errors, check.msg)
```

```python
from tm25rays.sobol import Sobol

seq = Sobol(2)
points = [seq() for _ in range(1024)]
```

```python
from tm25rays.log import LogPlusCout

with LogPlusCout(True, "run.log") as out:
    out.write("reading rays\n")
```

## What the package does not do

It does not read or write ray files. There is no reader or writer for TM-25
binary files, text ray files, or any vendor format. There is also no reader for
tabulated z(x, y) data. Headers and ray arrays are built in memory from values
you supply. The package has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```