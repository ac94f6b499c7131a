from ambusim.cancel import CancelQueue
from ambusim.car import Car, CarType
from ambusim.patient import Patient, PatientType, cancellation_request
from ambusim.queues import PriorityQueue


def make_patient(pid):
    return Patient(ptype=PatientType.NORMAL, pid=pid, hid=1, distance=10, request_time=1)


def car_with(patient, finish_time=0):
    return Car(CarType.NORMAL, 5, 1, patient=patient, finish_time=finish_time)


def test_cancel_before_car_moves_unassigned():
    patient = make_patient(1)
    queue = CancelQueue()
    queue.enqueue(patient)
    assert queue.cancel_before_car_moves(patient, PriorityQueue(), PriorityQueue()) is True
    assert queue.is_empty()


def test_cancel_before_car_moves_assigned_out():
    patient = make_patient(1)
    queue = CancelQueue()
    queue.enqueue(patient)
    out_cars = PriorityQueue()
    out_cars.enqueue(car_with(patient), -4)
    assert queue.cancel_before_car_moves(patient, out_cars, PriorityQueue()) is False
    assert list(queue) == [patient]


def test_cancel_before_car_moves_assigned_back():
    patient = make_patient(1)
    queue = CancelQueue()
    queue.enqueue(patient)
    back_cars = PriorityQueue()
    back_cars.enqueue(car_with(patient), -4)
    assert queue.cancel_before_car_moves(patient, PriorityQueue(), back_cars) is False
    assert len(queue) == 1


def test_cancel_before_car_moves_not_queued():
    queue = CancelQueue()
    queue.enqueue(make_patient(2))
    assert queue.cancel_before_car_moves(make_patient(1), PriorityQueue(), PriorityQueue()) is False
    assert len(queue) == 1


def test_cancel_before_pickup_moves_car_to_back():
    patient = make_patient(1)
    other = make_patient(2)
    queue = CancelQueue()
    queue.enqueue(patient)
    out_cars = PriorityQueue()
    car = car_with(patient, finish_time=9)
    other_car = car_with(other)
    out_cars.enqueue(other_car, -3)
    out_cars.enqueue(car, -6)
    back_cars = PriorityQueue()
    assert queue.cancel_before_pickup(patient, out_cars, back_cars) is True
    assert [c for c, _ in out_cars] == [other_car]
    assert list(back_cars) == [(car, -9)]
    assert queue.is_empty()


def test_cancel_before_pickup_matches_cancellation_record():
    patient = make_patient(7)
    record = cancellation_request(7, 1, 3)
    queue = CancelQueue()
    queue.enqueue(record)
    out_cars = PriorityQueue()
    car = car_with(patient, finish_time=5)
    out_cars.enqueue(car, -2)
    back_cars = PriorityQueue()
    assert queue.cancel_before_pickup(record, out_cars, back_cars) is True
    assert out_cars.is_empty()
    assert back_cars.peek() == (car, -5)
    assert queue.is_empty()


def test_cancel_before_pickup_not_found():
    patient = make_patient(1)
    out_cars = PriorityQueue()
    back_cars = PriorityQueue()
    assert CancelQueue().cancel_before_pickup(patient, out_cars, back_cars) is False
    assert out_cars.is_empty() and back_cars.is_empty()


def test_cancel_before_pickup_already_in_back():
    patient = make_patient(1)
    out_cars = PriorityQueue()
    back_cars = PriorityQueue()
    out_cars.enqueue(car_with(patient), -2)
    back_cars.enqueue(car_with(patient), -8)
    assert CancelQueue().cancel_before_pickup(patient, out_cars, back_cars) is False
    assert len(out_cars) == 1
    assert len(back_cars) == 1


def test_cancel_on_car_reschedules():
    patient = make_patient(1)
    other = make_patient(2)
    queue = CancelQueue()
    queue.enqueue(patient)
    back_cars = PriorityQueue()
    car = car_with(patient, finish_time=2)
    other_car = car_with(other, finish_time=5)
    back_cars.enqueue(car, -20)
    back_cars.enqueue(other_car, -5)
    assert queue.cancel_on_car(patient, PriorityQueue(), back_cars) is True
    assert list(back_cars) == [(car, -2), (other_car, -5)]
    assert queue.is_empty()


def test_cancel_on_car_not_found():
    patient = make_patient(1)
    queue = CancelQueue()
    queue.enqueue(patient)
    assert queue.cancel_on_car(patient, PriorityQueue(), PriorityQueue()) is False
    assert list(queue) == [patient]