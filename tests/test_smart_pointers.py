from ferrisdrill.drills.smart_pointers import (
    Cons,
    Cow,
    abs_all,
    create_empty_list,
    create_non_empty_list,
)


def test_create_empty_list():
    assert create_empty_list() is None


def test_create_non_empty_list():
    assert create_non_empty_list() != create_empty_list()
    assert isinstance(create_non_empty_list(), Cons)


def test_cons_iterates_values():
    assert list(Cons(4, Cons(5))) == [4, 5]


def test_reference_mutation():
    data = (-1, 0, 1)
    cow = Cow.borrowed(data)
    result = abs_all(cow)
    assert result.is_owned
    assert list(result) == [1, 0, 1]
    assert data == (-1, 0, 1)


def test_reference_no_mutation():
    data = [0, 1, 2]
    result = abs_all(Cow.borrowed(data))
    assert not result.is_owned
    assert result.data is data


def test_owned_no_mutation():
    data = [0, 1, 2]
    result = abs_all(Cow.owned(data))
    assert result.is_owned
    assert result.data is data


def test_owned_mutation():
    data = [-1, 0, 1]
    result = abs_all(Cow.owned(data))
    assert result.is_owned
    assert result.data is data
    assert data == [1, 0, 1]


def test_to_mut_copies_borrowed_once():
    data = [1, 2]
    cow = Cow.borrowed(data)
    first = cow.to_mut()
    assert first is not data
    assert cow.to_mut() is first
    assert len(cow) == 2
    assert cow[1] == 2