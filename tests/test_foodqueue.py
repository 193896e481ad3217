import pytest

from bnmo.foodqueue import CAPACITY, Food, FoodQueue


def sample_foods():
    return [
        Food("M0", 1, 1, 10000),
        Food("M1", 2, 2, 2000),
        Food("M2", 3, 3, 3000),
    ]


def filled_queue():
    queue = FoodQueue()
    for food in sample_foods():
        queue.enqueue(food)
    return queue


def test_new_queue_is_empty():
    queue = FoodQueue()
    assert queue.is_empty()
    assert len(queue) == 0
    assert not queue.is_full()


def test_enqueue_keeps_order():
    queue = filled_queue()
    assert [food.name for food in queue] == ["M0", "M1", "M2"]
    assert len(queue) == 3


def test_dequeue_returns_head():
    queue = filled_queue()
    removed = queue.dequeue()
    assert removed == Food("M0", 1, 1, 10000)
    assert [food.name for food in queue] == ["M1", "M2"]


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        FoodQueue().dequeue()


def test_full_queue_rejects_enqueue():
    queue = FoodQueue()
    for i in range(CAPACITY):
        queue.enqueue(Food(f"M{i}", 1, 1, 100))
    assert queue.is_full()
    with pytest.raises(OverflowError):
        queue.enqueue(Food("X", 1, 1, 100))


def test_remove_at_head():
    queue = filled_queue()
    assert queue.remove_at(0).name == "M0"
    assert [food.name for food in queue] == ["M1", "M2"]


def test_remove_at_middle():
    queue = filled_queue()
    assert queue.remove_at(1).name == "M1"
    assert [food.name for food in queue] == ["M0", "M2"]


def test_remove_at_tail():
    queue = filled_queue()
    assert queue.remove_at(2).name == "M2"
    assert len(queue) == 2


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_remove_at_out_of_range(index):
    with pytest.raises(IndexError):
        filled_queue().remove_at(index)


def test_format_orders_empty():
    text = FoodQueue().format_orders()
    assert text.startswith("Daftar Pesanan\t\t\t  Banyaknya pesanan: 0\n")
    assert text.endswith("\t| \t\t\t| \t\t| \n\n")


def test_format_orders_rows():
    text = filled_queue().format_orders()
    assert "Banyaknya pesanan: 3\n" in text
    assert "M0\t| 1\t\t\t| 1\t\t| 10000 \n" in text
    assert "M2\t| 3\t\t\t| 3\t\t| 3000 \n" in text
    assert text.index("M0") < text.index("M1") < text.index("M2")


def test_format_cooking_rows():
    text = filled_queue().format_cooking()
    assert text.startswith("Daftar Makanan yang sedang dimasak\n")
    assert "M1\t| 2\n" in text
    assert text.endswith("M2\t| 3\n\n")


def test_format_ready_empty():
    text = FoodQueue().format_ready()
    assert text.startswith("Daftar Makanan yang dapat disajikan\n")
    assert text.endswith(" \t| \n\n")


def test_format_ready_uses_durability():
    queue = FoodQueue()
    queue.enqueue(Food("M2", 1, 4, 15000))
    assert queue.format_ready().endswith("M2\t| 4\n\n")


def test_dequeue_after_format_reflects_removal():
    queue = filled_queue()
    queue.dequeue()
    text = queue.format_orders()
    assert "Banyaknya pesanan: 2\n" in text
    assert "M0\t|" not in text