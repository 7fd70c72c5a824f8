from wetee.subnet import Subnet, Transaction, Transactions


def test_default_works():
    subnet = Subnet()
    assert subnet.get() is False


def test_it_works():
    subnet = Subnet()
    assert subnet.get() is False
    subnet.set()
    assert subnet.get() is True


def test_list_empty_before_set():
    assert Subnet().list() is None


def test_set_twice_appends():
    subnet = Subnet()
    subnet.set()
    assert subnet.list() == Transactions()
    subnet.set()
    assert subnet.list().transactions == [2]
    subnet.set()
    assert subnet.list().transactions == [2, 2]


def test_list_returns_copy():
    subnet = Subnet()
    subnet.set()
    snapshot = subnet.list()
    snapshot.transactions.append(99)
    assert subnet.list().transactions == []


def test_transaction_holds_value():
    assert Transaction(i=5) == Transaction(i=5)
    assert Transaction(i=5) != Transaction(i=6)