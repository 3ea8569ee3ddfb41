# reisebuero

A small travel agency manager. It reads bookings from a JSON file, groups
them into travels and customers, shows and edits them, and writes everything
back out as JSON together with a short statistics summary. Messages and
labels are in German.

Four kinds of booking are supported (module `reisebuero.bookings`):

- `FlightBooking` – `from_dest`, `to_dest`, `airline`, `booking_class`
- `HotelBooking` – `hotel`, `town`, `room_type`
- `RentalCarReservation` – `pickup_location`, `return_location`, `company`, `car_type`
- `TrainTicket` – `from_station`, `to_station`, `departure_time`, `arrival_time`,
  `booking_class`, `stops`

All of them share `id`, `price`, `from_date` and `to_date` and have
`show_details()`, which returns a German one-line description.

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

The `reisebuero` command takes a subcommand and the booking file to read:

```
reisebuero summary buchungen.json
reisebuero customer buchungen.json 1
reisebuero travel buchungen.json 17
reisebuero booking buchungen.json 42
reisebuero edit buchungen.json 42 --price 199 --from 01.06.2024 --to 07.06.2024
```

- `summary` prints how many bookings, travels and customers were read.
- `customer FILE CUSTOMER_ID` prints the customer's ID and names and a
  tab-separated table of their travels with start and end date
  (e.g. `Montag, 3. Juni 2024`).
- `travel FILE TRAVEL_ID` prints one line per booking of the travel: its kind
  (`flug`, `hotel`, `auto`, `zug`) and ID, start, end and price.
- `booking FILE BOOKING_ID` prints the booking's description, its dates and
  price, its two type-specific fields (e.g. `Hotel` and `Ort`) and readable
  names for its tariff, booking class or room category.
- `edit FILE BOOKING_ID` changes a booking. Options: `--price`,
  `--from TT.MM.JJJJ`, `--to TT.MM.JJJJ`, `--extra1`, `--extra2` (the two
  type-specific fields: stations, airports, hotel and town, or pickup and
  return location) and `--output` (target file, default: the input file).
  If nothing actually changes, it prints `Keine Änderungen.` and writes
  nothing; otherwise it saves all bookings and prints the statistics summary.

The command exits with status 1 when the file cannot be read or the
customer, travel or booking is not found.

## Library use

```python
from reisebuero.agency import TravelAgency

agency = TravelAgency()
problems = agency.read_file("buchungen.json")   # messages for skipped entries

customer = agency.find_customer_by_id("1")
for travel in customer.travels:
    for booking in travel.bookings:
        print(booking.show_details())

print(agency.statistics().message())

agency.write_file("buchungen_neu.json")          # returns the Statistics
```

`TravelAgency.load_entries()` does the same as `read_file()` for entries
already in memory, and `to_entries()` returns the bookings as JSON-ready
dictionaries. `find_booking()`, `find_customer_by_id()` and
`find_travel_by_id()` look things up by ID and return `None` if nothing
matches.

Entries in the input file need `id`, `price`, `fromDate`, `toDate` (as
`yyyyMMdd`), `type` (`Flight`, `Hotel`, `Rental`/`RentalCar` or `Train`),
`customerId`, `travelId` and the customer's first and last name
(`firstName`/`lastName` or `customerFirstname`/`customerLastname`).
Entries with missing or malformed fields and duplicate booking IDs are skipped
and logged; the rest of the file is still loaded. A file that cannot be
opened raises `OSError`. Saved files use indented JSON with sorted keys.

Editing a booking goes through `reisebuero.details.BookingForm`:

```python
from reisebuero.details import BookingForm

form = BookingForm.from_booking(booking)
form.update(price=199.0)
form.apply()
```

`update()` accepts `price`, `from_date`, `to_date`, `extra1` and `extra2`
and raises `TypeError` for anything else. `apply()` writes the values back
into the booking only when a field was actually changed, and returns whether
it did. `describe_train_class()`, `describe_flight_class()` and
`describe_room_type()` turn codes such as `SP2`, `J` or `DZ` into readable
names.

The functions behind the command-line tables are in `reisebuero.cli`:
`travel_period()`, `customer_travel_rows()`, `travel_booking_rows()` and
`format_long_date()`.

## What it does not do

There is no graphical interface and no interactive session: every
`reisebuero` call reads the file, does one thing and exits. The statistics
after saving are printed or returned, not shown in a window.