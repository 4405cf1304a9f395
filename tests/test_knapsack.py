import pytest

from taskkit.knapsack import main, max_weight, read_input


def test_best_subset_below_capacity():
    assert max_weight(10, [1, 4, 8]) == 9


def test_exact_fill():
    assert max_weight(10, [3, 7]) == 10


def test_everything_fits():
    weights = [2, 3, 4]
    assert max_weight(100, weights) == sum(weights)


@pytest.mark.parametrize("capacity, weights", [(0, [1, 2]), (5, []), (3, [4, 5])])
def test_nothing_fits(capacity, weights):
    assert max_weight(capacity, weights) == 0


def test_result_never_exceeds_capacity():
    for capacity in range(0, 30):
        assert max_weight(capacity, [5, 7, 11, 13]) <= capacity


def test_order_does_not_matter():
    assert max_weight(20, [9, 2, 14, 6]) == max_weight(20, sorted([9, 2, 14, 6]))


def test_negative_weight_rejected():
    with pytest.raises(ValueError):
        max_weight(10, [3, -1])


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        max_weight(-1, [3])


def test_read_input(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("10 3\n1 4 8\n", encoding="utf-8")
    assert read_input(path) == (10, [1, 4, 8])


def test_read_input_too_few_weights(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("10 3\n1 4\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_input(path)


def test_main_prints_answer(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("10 3\n8 1 4\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Максимально можно унести 9 килограмм!\n"


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1