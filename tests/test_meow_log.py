from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from core.errors import MissingArgumentError, OutOfRangeError
from domain.meow.models import Cat, Dog
from storage.meow_log import MeowLogger, compose_key, entity_key, entity_name, split_key


def test_missing_file_reads_empty(meow_logger, log_path) -> None:
    assert not log_path.exists()
    assert meow_logger.read_statistics() == {}


def test_log_accumulates(meow_logger, cat) -> None:
    assert meow_logger.log_meow(cat) == 1
    assert meow_logger.log_meow(cat) == 2
    assert meow_logger.read_statistics() == {"Cat|Барсик": 2}


def test_log_with_times(meow_logger, cat, dog) -> None:
    meow_logger.log_meow(cat, times=3)
    meow_logger.log_meow(dog)
    assert meow_logger.read_statistics() == {"Cat|Барсик": 3, "Dog|Шарик": 1}


def test_file_format(meow_logger, log_path, cat, dog) -> None:
    meow_logger.log_meow(cat, 2)
    meow_logger.log_meow(dog)
    assert log_path.read_text(encoding="utf-8") == "Cat|Барсик;2\nDog|Шарик;1\n"


def test_same_name_different_kind_kept_apart(meow_logger) -> None:
    meow_logger.log_meow(Cat("Барсик"))
    meow_logger.log_meow(Dog("Барсик"))
    assert meow_logger.read_statistics() == {"Cat|Барсик": 1, "Dog|Барсик": 1}


def test_log_rejects_missing_entity(meow_logger) -> None:
    with pytest.raises(MissingArgumentError):
        meow_logger.log_meow(None)


@pytest.mark.parametrize("times", [0, -1])
def test_log_rejects_bad_times(meow_logger, cat, times, log_path) -> None:
    with pytest.raises(OutOfRangeError):
        meow_logger.log_meow(cat, times)
    assert not log_path.exists()


def test_clear(meow_logger, cat, log_path) -> None:
    meow_logger.log_meow(cat)
    meow_logger.clear_statistics()
    assert log_path.exists()
    assert log_path.read_text(encoding="utf-8") == ""
    assert meow_logger.read_statistics() == {}


def test_clear_without_file_is_noop(meow_logger, log_path) -> None:
    meow_logger.clear_statistics()
    assert not log_path.exists()


def test_lenient_parsing(meow_logger, log_path) -> None:
    log_path.write_text(
        "\n".join(
            [
                "Cat|Барсик;2",
                "",
                "   ",
                "broken line",
                "Cat|Мурзик;many",
                "a;b;c",
                "Dog|Шарик; 4 ",
                "Cat|Барсик;3",
                "Cat|Пушок;1_000",
            ]
        ),
        encoding="utf-8",
    )
    assert meow_logger.read_statistics() == {"Cat|Барсик": 5, "Dog|Шарик": 4}


def test_duplicates_are_merged_on_next_write(meow_logger, log_path, cat) -> None:
    log_path.write_text("Cat|Барсик;2\nCat|Барсик;3\n", encoding="utf-8")
    meow_logger.log_meow(cat)
    assert log_path.read_text(encoding="utf-8") == "Cat|Барсик;6\n"


def test_bom_and_crlf_tolerated(meow_logger, log_path) -> None:
    log_path.write_bytes("\ufeffCat|Барсик;2\r\nDog|Шарик;1\r\n".encode("utf-8"))
    assert meow_logger.read_statistics() == {"Cat|Барсик": 2, "Dog|Шарик": 1}


def test_file_is_source_of_truth(log_path, cat) -> None:
    first = MeowLogger(log_path)
    second = MeowLogger(log_path)
    first.log_meow(cat)
    second.log_meow(cat)
    assert first.read_statistics() == {"Cat|Барсик": 2}


def test_key_helpers(cat) -> None:
    assert compose_key("Cat", "Барсик") == "Cat|Барсик"
    assert split_key("Cat|Барсик") == ("Cat", "Барсик")
    assert split_key("no-separator") is None
    assert split_key("a|b|c") is None
    assert entity_name(cat) == "Барсик"
    assert entity_key(cat) == "Cat|Барсик"


def test_entity_name_without_separator() -> None:
    class Odd:
        kind = Cat.kind

        def __str__(self) -> str:
            return "Безымянный"

    assert entity_name(Odd()) == "Безымянный"


def test_statistics_for_name(meow_logger) -> None:
    meow_logger.log_meow(Cat("Барсик"), 2)
    meow_logger.log_meow(Dog("Барсик"))
    meow_logger.log_meow(Cat("Мурзик"))
    assert meow_logger.statistics_for_name("Барсик") == [("Cat|Барсик", 2), ("Dog|Барсик", 1)]
    assert meow_logger.statistics_for_name("барсик") == []


def test_print_all(meow_logger, out, cat, dog) -> None:
    meow_logger.log_meow(cat, 2)
    meow_logger.log_meow(dog)
    meow_logger.print_all_statistics()
    assert out.getvalue() == "Статистика мяуканий:\nCat | Барсик: 2\nDog | Шарик: 1\n"


def test_print_all_empty(meow_logger, out) -> None:
    meow_logger.print_all_statistics()
    assert out.getvalue() == "Статистика мяуканий отсутствует.\n"


def test_print_all_keeps_unsplittable_keys(meow_logger, out, log_path) -> None:
    log_path.write_text("odd;4\n", encoding="utf-8")
    meow_logger.print_all_statistics()
    assert out.getvalue().splitlines()[1] == "odd: 4"


def test_print_for_entity(meow_logger, out, cat, dog) -> None:
    meow_logger.log_meow(cat)
    meow_logger.print_statistics_for(cat)
    meow_logger.print_statistics_for(dog)
    meow_logger.print_statistics_for(None)
    assert out.getvalue().splitlines() == [
        "Cat | Барсик: 1",
        'Для "Dog Шарик" статистика не найдена.',
        "Сущность не задана.",
    ]


def test_print_for_name(meow_logger, out) -> None:
    meow_logger.log_meow(Cat("Барсик"), 2)
    meow_logger.log_meow(Dog("Барсик"))
    meow_logger.print_statistics_for_name("Барсик")
    meow_logger.print_statistics_for_name("Мурзик")
    meow_logger.print_statistics_for_name("  ")
    assert out.getvalue().splitlines() == [
        "Cat | Барсик: 2",
        "Dog | Барсик: 1",
        'Для "Мурзик" статистика не найдена.',
        "Имя сущности не задано.",
    ]


def test_log_emits_event(meow_logger, cat) -> None:
    with capture_logs() as logs:
        meow_logger.log_meow(cat, 2)
    events = [entry for entry in logs if entry["event"] == "meow.logged"]
    assert events == [
        {"event": "meow.logged", "log_level": "info", "key": "Cat|Барсик", "times": 2, "total": 2}
    ]


def test_counts_follow_int32_parsing(meow_logger, log_path) -> None:
    log_path.write_text(
        "\n".join(
            [
                "Cat|Барсик;٣",
                "Cat|Мурзик;１２",
                "Dog|Шарик;2147483648",
                "Dog|Бобик;-2147483649",
                "Cat|Пушок;2147483647",
                "Cat|Тимка;+7",
            ]
        ),
        encoding="utf-8",
    )
    assert meow_logger.read_statistics() == {"Cat|Пушок": 2147483647, "Cat|Тимка": 7}
