from datetime import datetime

from services.order_number import date_prefix


DAY = datetime(2024, 6, 15, 9, 30)


def test_date_prefix():
    assert date_prefix(DAY) == "240615"
    assert date_prefix(datetime(2031, 1, 2)) == "310102"


def test_first_number_of_the_day(numbers):
    assert numbers.next(DAY) == "240615-0001"


def test_sequence_grows_with_saved_orders(numbers, store, make_order):
    issued = []
    for _ in range(5):
        number = numbers.next(DAY)
        issued.append(number)
        store.add(make_order(order_number=number))

    assert issued == [f"240615-{n:04d}" for n in range(1, 6)]
    assert issued == sorted(issued)
    assert len(set(issued)) == 5


def test_unsaved_number_is_handed_out_again(numbers):
    # nothing is reserved until the order is stored
    assert numbers.next(DAY) == numbers.next(DAY)


def test_sequence_restarts_next_day(numbers, store, make_order):
    store.add(make_order(order_number=numbers.next(DAY)))
    store.add(make_order(order_number=numbers.next(DAY)))

    assert numbers.next(datetime(2024, 6, 16, 8, 0)) == "240616-0001"
    assert numbers.next(DAY) == "240615-0003"


def test_uses_clock_by_default(numbers):
    number = numbers.next()
    assert number == f"{datetime.now():%y%m%d}-0001"
