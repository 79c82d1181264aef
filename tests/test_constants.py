from nbodies import constants as C


def test_gravitational_constant():
    assert C.G == 6.674e-11


def test_record_format_has_six_fields():
    assert len((C.RECORD_FORMAT % (1, 2, 3, 4, 5, "x")).split()) == C.RECORD_FIELDS
