# pengiriman

A small toolkit for a parcel-delivery desk. It does three jobs:

- **Delivery estimates**: how many days a parcel takes between two cities,
  read from a plain text table.
- **Shipment history**: look up a shipment by its 10-character receipt code
  in a history file, and save the result to a text file named after the code.
- **Statistics chart**: compute the geometry of a simple bar chart from
  labels and values.

Messages shown to the user are in Indonesian.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `pengiriman`, with four subcommands:

```
pengiriman cities
pengiriman estimate ORIGIN DESTINATION [--file EstimasiKota.txt]
pengiriman history CODE [--file RiwayatPengiriman.txt] [--save DIR]
pengiriman stats [LABEL=VALUE ...] [--title TITLE] [--width 400] [--height 300]
```

- `cities` prints the known cities: Jakarta, Bandung, Surabaya, Yogyakarta,
  Malang.
- `estimate` prints, for example,
  `Estimasi Dari Jakarta ke Bandung adalah 1 hari`. When no route is known,
  or origin and destination are the same, the message goes to standard error
  and the exit status is 1.
- `history` validates the code, prints the shipment or
  `Data tidak ditemukan.` (exit status 1 when not found). With `--save DIR`
  the printed text is also written to `DIR/<code>.txt`. An invalid code
  prints its error to standard error with exit status 1.
- `stats` prints the title (if any) and one line per bar:
  label, value and the rectangle `left,top,right,bottom`, tab separated.
  A pair that is not `LABEL=INTEGER` gives exit status 2.

`pengiriman --help` lists all of this.

## Data files

### Estimates (`EstimasiKota.txt`)

One route per line, comma separated: the two cities and the number of days.
The order of the two cities does not matter; a route from A to B and from B
to A share one entry, and a later line replaces an earlier one. The day count
is read from the leading integer of the third field (0 if there is none).
A missing file gives an empty table.

```
Jakarta,Bandung,1
Surabaya,Jakarta,3
Yogyakarta,Malang,2
```

### Shipment history (`RiwayatPengiriman.txt`)

One shipment per line, fields separated by `|`: receipt code, origin,
destination, date, status and current position. Lines with fewer than six
fields are ignored; codes are compared without regard to case, and the first
match wins. A missing file finds nothing.

```
AB12345678|Jakarta|Surabaya|2024-05-01|Dalam perjalanan|Semarang
```

## Library use

### Estimates (`pengiriman.estimasi`)

```python
from pengiriman.estimasi import EstimateError, load_estimates, route_key

table = load_estimates("EstimasiKota.txt")   # an EstimateTable
print(table.lookup("Bandung", "Jakarta"))    # days, as an int
print(table.describe("Jakarta", "Bandung"))  # message for the user
print(route_key("Jakarta", "Bandung"))       # "Bandung-Jakarta", either order
```

`lookup` raises `EstimateError` when a city is empty, when both cities are
the same, or when the route is not in the table. `describe` never raises; it
returns the error message instead.

### Shipment history (`pengiriman.history`)

```python
from pengiriman.history import find_record, save_result, search, validate_code

code = validate_code(" AB12345678 ")   # trimmed; must be exactly 10 characters
record = find_record("RiwayatPengiriman.txt", code)   # ShipmentRecord or None
if record is not None:
    print(record.format())

text = search("RiwayatPengiriman.txt", code)   # formatted record or "Data tidak ditemukan."
path = save_result(code, text, ".")            # writes ./AB12345678.txt, returns the path
```

`HistoryError` is raised for an empty code or one not 10 characters long
(`validate_code`, `search`), and by `save_result` for an empty code, empty
text, a code holding any of `\ / : * ? " < > |`, or a failed write.

### Chart (`pengiriman.chart`)

```python
from pengiriman.chart import BarChart

chart = BarChart()
chart.set_title("Pengiriman per kota")
chart.set_data(["Jakarta", "Bandung", "Surabaya"], [12, 7, 9])
for bar in chart.layout(400, 300):
    print(bar.label, bar.left, bar.top, bar.right, bar.bottom, bar.height)
chart.clear()   # drops the data, keeps the title
```

`layout` places the bars inside a 40-pixel margin, divides the width equally
between them with a 10-pixel gap after each, and scales heights so the
largest value fills the chart height. It returns an empty list when there is
no data. `set_data` raises `ValueError` if labels and values differ in
length; `layout` raises `ValueError` if the largest value is zero.

## What it does not do

There is no graphical interface: no windows, combo boxes or dialogs. The
chart is computed as rectangles only and is not drawn or rendered to an
image. The package reads the estimate and history files but offers no way to
add or edit their entries.