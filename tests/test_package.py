import pytest

from armazemsim.package import Package, State


def test_default_package_is_stored_with_empty_route():
    package = Package()
    assert package.state is State.STORED
    assert package.route == []
    assert package.id == 0
    assert package.original_label_id == 0


def test_constructor_keeps_fields():
    package = Package(3, 1101, "Rem1101", "Dest1101", "000", "002", "Normal")
    assert package.id == 3
    assert package.original_label_id == 1101
    assert package.sender == "Rem1101"
    assert package.recipient == "Dest1101"
    assert package.origin == "000"
    assert package.destination == "002"
    assert package.kind == "Normal"
    assert package.state is State.STORED


def test_state_change():
    package = Package()
    package.state = State.DELIVERED
    assert package.state is State.DELIVERED


def test_routes_are_not_shared():
    first = Package()
    second = Package()
    first.route.append("000")
    assert second.route == []
    assert first.route == ["000"]


def test_route_consumed_from_front():
    package = Package(route=["000", "001", "002"])
    package.route.pop(0)
    assert package.route[0] == "001"


@pytest.mark.parametrize("state", list(State))
def test_every_state_can_be_assigned(state):
    package = Package(1, 1102, "Rem1102", "Dest1102", "001", "003", "Normal")
    package.state = state
    assert package.state is state
    assert package.id == 1
    assert package.destination == "003"