# studentdesk

An interactive console application for keeping a register of students. Each
student (`studentdesk.models.Student`) has a first name, a last name, a unique
roll ID, a GPA and exactly five course IDs. From the home menu you can:

- add a student by hand, or import many at once from a text file
- find a student by first name (case-insensitive) or by roll ID
- list the students registered in a given course
- count the students in the register
- delete a student by roll ID, after confirming
- show every student

The package also contains `studentdesk.pressure`, a simulation of a pressure
monitor on a general-purpose I/O port: a sensor reads a pressure value, a
controller compares it with a threshold, and an alarm manager drives an LED
and a buzzer.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Running the student register

```
studentdesk
```

Options:

- `--data-file PATH`: file used by "Read from file" (default `../students.txt`,
  relative to the current directory)
- `--demo`: start with four sample students
- `--fast`: print text at once and skip the pauses between screens
- `--debug`: log debug messages

After the splash screen you reach the home menu. Type the number of an option
and press Enter; `0` on the home menu quits. Every screen shows the path of
screens that led to it, and the screen stack holds at most five screens.
Input is read word by word, so names cannot contain spaces. The program also
ends when input runs out or on Ctrl-C, printing `--> Program finished <--`.

### Importing from a file

The "Read from file" option of the "Add Student" screen reads whitespace
separated records of nine fields:

```
roll_id first_name last_name gpa course1 course2 course3 course4 course5
```

For example:

```
5 Mona Adel 3.2 1 2 3 4 5
6 Karim Fathy 2.9 6 7 8 9 10
```

Reading stops at the first record that is incomplete or malformed. Each
record is reported as a success or a failure; a record fails when its roll ID
is already in use. A missing file imports nothing.

## Using the library

```python
from studentdesk.models import Student
from studentdesk.store import StudentStore, DuplicateRollIdError

store = StudentStore()
store.add(Student("Joe", "Samy", 1, 3.5, (1, 2, 3, 4, 5)))

print(store.find_by_first_name("joe").roll_id)            # 1
print([s.first_name for s in store.students_in_course(3)])  # ['Joe']

try:
    store.add(Student("Other", "Person", 1, 2.0, (1, 1, 1, 1, 1)))
except DuplicateRollIdError:
    print("roll id already taken")

store.update(1, gpa=3.9)      # None or a negative number keeps a field
store.delete_by_id(1)
```

Lookups that find nothing raise `StudentNotFoundError`. `import_students`
adds many students and calls optional success and failure callbacks.

Records in the import format are parsed by
`studentdesk.fileio.parse_students(text)` or read from disk by
`studentdesk.fileio.read_students(path)`.

The interface pieces can be used on their own: `studentdesk.console.Console`
writes ANSI-coloured text and reads tokens from any text streams,
`studentdesk.navigator.Navigator` runs a stack of screens, and
`studentdesk.app.build_navigator(console, store, data_file)` wires them to the
screens in `studentdesk.screens`.

### Pressure monitor simulation

```python
from studentdesk.pressure.gpio import GpioPort
from studentdesk.pressure.system import PressureSystem

port = GpioPort()
system = PressureSystem(port)   # initializes the port
port.set_input(35)              # the low byte is the pressure value
system.run(5)                   # five passes of the super loop
print(port.reads, system.controller.pressure)   # 4 35
```

Each pass steps the sensor, controller, alarm manager, buzzer and LED in that
order. The default threshold is 20 and the default alarm time 5000. The LED
and the buzzer drive the same output pin (pin 13 of the output register);
`GpioPort.alarm_active()` reports that pin. When the alarm manager runs its
"on" state it counts the alarm time down within that same step and then asks
both outputs to switch off, so the outputs apply the "off" request in the same
pass.

## What it does not do

- The register lives in memory only; nothing is saved, and students are lost
  when the program ends. Files are only read, never written.
- The home menu has no entry for updating a student. An update screen exists
  (`studentdesk.screens.update_student`) and `StudentStore.update` works, but
  the menu does not lead to them.

## Running the tests

```
pip install .[test]
pytest
```