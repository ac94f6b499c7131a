from ambusim.patient import Patient, PatientType, cancellation_request


def test_patient_type_from_input_codes():
    normal = Patient(PatientType(1), pid=1, hid=1)
    special = Patient(PatientType(2), pid=2, hid=1)
    emergency = Patient(PatientType(3), pid=3, hid=1, severity=4)
    assert normal.ptype is PatientType.NORMAL
    assert special.ptype is PatientType.SPECIAL
    assert emergency.ptype is PatientType.EMERGENCY
    assert emergency.ptype == 3


def test_patient_fields_from_arguments():
    patient = Patient(PatientType.EMERGENCY, pid=7, hid=2, distance=30, request_time=4, severity=8)
    assert patient.ptype is PatientType.EMERGENCY
    assert (patient.pid, patient.hid, patient.distance) == (7, 2, 30)
    assert patient.request_time == 4
    assert patient.severity == 8
    assert patient.pickup_time == 0
    assert patient.waiting_time == 0
    assert patient.cancellation_time == 0


def test_waiting_time_is_pickup_minus_request():
    patient = Patient(PatientType.NORMAL, pid=1, hid=1, distance=10, request_time=3)
    patient.pickup_time = 11
    result = patient.calculate_waiting_time()
    assert result == 8
    assert patient.waiting_time == result


def test_waiting_time_zero_when_picked_up_at_request():
    patient = Patient(PatientType.SPECIAL, request_time=5, pickup_time=5)
    assert patient.calculate_waiting_time() == 0


def test_cancellation_request_fields():
    request = cancellation_request(12, 3, 9)
    assert request.pid == 12
    assert request.hid == 3
    assert request.cancellation_time == 9
    assert request.ptype is None
    assert request.request_time == 0


def test_patients_compare_by_identity():
    first = Patient(PatientType.NORMAL, pid=1)
    second = Patient(PatientType.NORMAL, pid=1)
    assert first == first
    assert (first == second) is False