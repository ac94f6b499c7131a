# ambusim

`ambusim` simulates how a network of hospitals dispatches ambulances to
patient requests, one time step at a time.

Each hospital owns a fleet of normal cars and special cars. Patient requests
arrive at set time steps and are queued at their hospital:

- **NP** (normal patients) are served by normal cars, first come first served;
- **SP** (special patients) are served by special cars, first come first served;
- **EP** (emergency patients) are served first, highest severity first, by a
  free normal car, or by a free special car if no normal car is free.

When a car is dispatched at time step `t`, its travel time is the patient's
distance divided (whole-number division) by the car's speed. It reaches the
patient at `t + travel` and is back at its hospital at `t + 2 * travel`. Until
pickup it is an *out car*; after that it is a *back car*. When it returns, its
patient counts as finished, with a waiting time of pickup time minus request
time, and the car is free again.

If an emergency patient arrives at a hospital whose free cars (normal plus
special) are no more than its waiting emergency patients, the patient is sent
to the nearest other hospital, by the distance matrix, that has any free car.
If there is none, the patient stays at its own hospital.

A cancellation takes effect when its time step is reached. If a car is still
on its way to that patient, the car turns back empty and needs as long to
return as it has travelled so far. A cancellation for a patient who has no car
yet, or whose car has already picked them up, does not remove the patient.

The run ends at the first time step, no earlier than step 5, at which every
request has arrived, no patient is waiting at any hospital and no car is out
or on its way back.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running a simulation

```
ambusim input.txt
```

If no input file is given, the command asks for its name. At every time step
it prints the number of out cars, back cars and finished patients, and the
number of waiting EP, NP and SP patients at each hospital.

When the run ends, a summary is written to `simulation_output.txt` with the
final time step, the total and finished patient counts, the average waiting
time, the number of redistributed emergency patients (reported as
"Auto-Promoted Patients"), and the number of free normal and special cars left
at each hospital.

Options:

- `-o FILE`, `--output FILE` — write the summary to `FILE` instead;
- `-q`, `--quiet` — do not print the per-step status.

The command exits with status 1, and a message on standard error, if the input
file cannot be read ("File Open Failure!!"), is malformed ("Invalid input:
..."), the summary cannot be written, or the run does not end within 10,000
time steps.

## Input file format

The input is a whitespace-separated text file, read in this order:

1. the number of hospitals `N`;
2. an `N x N` matrix of distances between hospitals;
3. the special car speed, then the normal car speed;
4. for each hospital, its number of special cars, then its number of normal cars;
5. the number of patient requests, followed by one request per line:
   - `NP <request time> <patient id> <hospital id> <distance>`
   - `SP <request time> <patient id> <hospital id> <distance>`
   - `EP <request time> <patient id> <hospital id> <distance> <severity>`
6. the number of cancellation requests, followed by one per line:
   `<cancel time> <patient id> <hospital id>`

Hospital ids are numbered from 1; an id outside `1..N`, an unknown patient
type, a non-integer where a number is expected, or a file that ends early is
rejected. Example:

```
2
0 7
7 0
11 5
1 2
1 1
4
NP 1 1 1 10
SP 1 2 2 22
EP 2 3 1 5 8
NP 3 4 2 15
1
2 4 2
```

## Using it as a library

```python
from ambusim.organizer import Organizer, load_input

organizer = Organizer(load_input("input.txt"), on_step=print)
summary = organizer.run(None)  # pass a path to also write the summary there
print(summary)
```

`Organizer` takes a `SimulationInput` and, optionally, `on_step` (called with
the status text after each step) and `max_steps` (default 10,000; `run`
raises `RuntimeError` beyond it). `step()` advances one time step and returns
whether the run is complete; `status_report()`, `summary()` and
`average_wait_time()` give the current figures.

The modules:

- `ambusim.queues` — `LinkedQueue` (FIFO) and `PriorityQueue` (highest
  priority first, ties kept in arrival order), raising `EmptyQueueError` when
  read while empty;
- `ambusim.patient` — `Patient`, `PatientType` and `cancellation_request`;
- `ambusim.car` — `Car`, `CarType` and `CarStatus`;
- `ambusim.timestep` — `GlobalTimeStep`, a counter starting at 1;
- `ambusim.hospital` — `Hospital`, which queues patients and hands out cars,
  with `simulate_patient` and `simulate_car` for taking a patient or car by a
  random draw in `[0, 100)`;
- `ambusim.cancel` — `CancelQueue`, handling cancellation requests;
- `ambusim.redist` — `Redistributor`, which finds the nearest other hospital
  with a free car;
- `ambusim.organizer` — `parse_input`, `load_input`, `SimulationInput` and
  `Organizer`;
- `ambusim.cli` — the `ambusim` command.