from imageserver.domain.ordering import (
    UNORDERED,
    assign_final_names,
    collect_image_files,
    extract_order_key,
    is_image_filename,
    sort_by_order_key,
)


def test_extract_order_key_reads_leading_digits() -> None:
    assert extract_order_key("4_sunset.png") == 4
    assert extract_order_key("007_x.png") == 7
    assert extract_order_key("123_.jpg") == 123


def test_extract_order_key_returns_unordered_without_prefix() -> None:
    for name in ["sunset.png", "sunset_4.png", "4sunset.png", "_4_x.png", "001.png", "a1_b.png", ""]:
        assert extract_order_key(name) == UNORDERED


def test_unordered_sorts_after_any_key() -> None:
    assert UNORDERED > 10**12


def test_is_image_filename_is_case_insensitive() -> None:
    assert is_image_filename("a.JPG")
    assert is_image_filename("b.webp")
    assert is_image_filename("c.Svg")
    assert not is_image_filename("notes.txt")
    assert not is_image_filename("png")
    assert not is_image_filename(".png")


def test_sort_is_stable_for_unordered_files() -> None:
    files = collect_image_files(["z.png", "3_c.png", "a.png", "1_a.png", "notes.txt"])
    ordered = [image.filename for image in sort_by_order_key(files)]
    assert ordered == ["1_a.png", "3_c.png", "z.png", "a.png"]


def test_assign_final_names_keeps_gaps_and_extension() -> None:
    files = sort_by_order_key(collect_image_files(["10_x.JPG", "2_y.png", "m.gif", "k.png"]))
    assert assign_final_names(files) == ["002.png", "010.JPG", "unk_001.gif", "unk_002.png"]


def test_assign_final_names_matches_example() -> None:
    files = sort_by_order_key(collect_image_files(["5_x.jpg", "z.jpg"]))
    assert assign_final_names(files) == ["005.jpg", "unk_001.jpg"]


def test_assign_final_names_does_not_truncate_large_keys() -> None:
    files = collect_image_files(["1234_big.png"])
    assert assign_final_names(files) == ["1234.png"]
