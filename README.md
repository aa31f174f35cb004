# airwatcher

Estimates air quality from a network of sensors and spots sensors whose
readings do not agree with their neighbourhood. The interactive screens are
in French.

## Data

The data lives in a folder of semicolon-separated files, one record per line:

- `sensors.csv`: `Sensor<id>;<latitude>;<longitude>;`
- `measurements.csv`: `YYYY-MM-DD HH:MM:SS;Sensor<id>;<attribute>;<value>;`
- `users.csv`: `User<id>;Sensor<id>;` (assigns a sensor to a user)

Measurement timestamps are read as local standard time. Lines whose timestamp
does not match `YYYY-MM-DD HH:MM:SS` are skipped with a warning.

## Installation

```
pip install .
```

## Command line

```
airwatcher [--data FOLDER]
```

`--data` names the folder holding the CSV files; it defaults to `CSV` in the
current directory. The command loads `sensors.csv` and `measurements.csv`
(a missing file is reported as `Unable to open file` on standard error) and
opens the interactive menu. You first pick the kind of user (government
agency, individual, provider); the main menu then offers:

- data analysis: estimate at a position between two dates, list of
  unreliable sensors, impact of an air cleaner;
- statistics: estimate over a zone, estimate at a point, sensors lying next
  to a reference sensor;
- user points;
- administration, for government agencies only: faulty sensors, marking a
  sensor as unreliable, flagging a user as malicious.

Entering `0` leaves a menu. End of input or Ctrl-C quits.

## Library use

```python
from airwatcher.store import DataStore
from airwatcher.processing import AirQualityProcessor

store = DataStore()
store.extract_all("CSV")        # sensors.csv then measurements.csv
store.extract_users("CSV")      # optional: links sensors to their users

processor = AirQualityProcessor(store)

# Inverse-distance weighted mean of the k nearest measurements.
value = processor.estimate_at(44.0, 1.1, 4, 0, -1)

# Mean of the point estimates over a disc sampled on a grid of spacing step.
zone = processor.estimate_zone(44.0, 1.1, 0.02, 4, 0.01, 0, -1)

# Sensors whose measurement departs from the zone estimate by more than a
# threshold: one entry per offending measurement, in timestamp order.
suspects = processor.find_diverted_sensors(0.02, 20.0, 4, 0.01, 0, -1)

# Sensors within 0.01 degrees of sensor 3 that measured in the period.
neighbours = processor.list_similar_sensors(3, 0, -1)
```

Times are Unix timestamps; a `stop` of `-1` or `None` means "now". When no
measurement falls in the time range the estimates are NaN. `estimate_zone`
raises `ValueError` for a `step` that is not positive. Looking up an unknown
sensor, user, individual, provider or cleaner with the `DataStore.get_*`
methods raises `airwatcher.store.RecordNotFoundError`.

The domain objects are in `airwatcher.models` (`Sensor`, `Measurement`,
`Attribute`, `Cleaner`) and `airwatcher.users` (`User`, `Individual`,
`Provider`, `GouvAgency`). A `GouvAgency` keeps track of the users it has
classified as reliable or unreliable.

## What it does not do

- The command does not load `users.csv` and no file defines user accounts, so
  from the command line the user points screen and the flagging of a
  malicious user always answer that the user was not found. Users can only be
  added to `DataStore.users` from code.
- Marking a sensor as unreliable only confirms the choice; nothing is
  recorded, and flags set on users are kept in memory only. Nothing is written
  back to the data folder.
- The air cleaner impact screen always uses the same cleaner (ID 1, at
  48.8566, 2.3522); cleaners are not read from any file.

## Tests

```
pip install .[test]
pytest
```