from vispeak.text.numeric import (
    NUMERIC_STAGES,
    convert_currency,
    convert_dates,
    convert_decimals,
    convert_measurement_units,
    convert_numeric_expressions,
    convert_ordinals,
    convert_percentages,
    convert_phone_numbers,
    convert_times,
    convert_year_ranges,
    remove_thousand_separators,
)


def test_stage_order() -> None:
    names = [name for name, _ in NUMERIC_STAGES]
    assert names.index("thousand_separators") < names.index("currency")
    assert names.index("thousand_separators") < names.index("decimals")
    assert names.index("measurement_units") < names.index("standalone_numbers")
    assert names[-1] == "standalone_numbers"


def test_year_range() -> None:
    assert convert_year_ranges("1873-1907") == (
        "một nghìn tám trăm bảy mươi ba đến một nghìn chín trăm lẻ bảy"
    )


def test_full_date() -> None:
    assert convert_dates("25/12/2023") == (
        "ngày hai mươi lăm tháng mười hai năm hai nghìn không trăm hai mươi ba"
    )


def test_full_date_does_not_double_prefix() -> None:
    assert convert_dates("ngày 2/9/1945") == (
        "ngày hai tháng chín năm một nghìn chín trăm bốn mươi lăm"
    )


def test_invalid_date_is_left_untouched() -> None:
    assert convert_dates("32/13/2023") == "32/13/2023"
    assert convert_dates("13/13") == "13/13"


def test_day_and_month_ranges() -> None:
    assert convert_dates("ngày 25-26/12") == "ngày hai mươi lăm đến hai mươi sáu tháng mười hai"
    assert convert_dates("5-6/2023") == (
        "tháng năm đến tháng sáu năm hai nghìn không trăm hai mươi ba"
    )


def test_short_dates() -> None:
    assert convert_dates("hạn 15/8") == "hạn mười lăm tháng tám"
    assert convert_dates("tháng 3/2024") == "tháng ba năm hai nghìn không trăm hai mươi tư"
    assert convert_dates("ngày 5 tháng 6") == "ngày năm tháng sáu"
    assert convert_dates("tháng 13") == "tháng 13"


def test_times() -> None:
    assert convert_times("7:30") == "bảy giờ ba mươi phút"
    assert convert_times("07:05:09") == "bảy giờ năm phút chín giây"
    assert convert_times("14h30") == "mười bốn giờ ba mươi"
    assert convert_times("8h sáng") == "tám giờ sáng"
    assert convert_times("10 giờ 15 phút") == "mười giờ mười lăm phút"


def test_invalid_times_are_left_untouched() -> None:
    assert convert_times("25:00") == "25:00"
    assert convert_times("10:75") == "10:75"


def test_ordinals() -> None:
    assert convert_ordinals("thứ 1") == "thứ nhất"
    assert convert_ordinals("thứ 2") == "thứ hai"
    assert convert_ordinals("lần 4") == "lần tư"
    assert convert_ordinals("chương 12") == "chương mười hai"


def test_thousand_separators() -> None:
    assert remove_thousand_separators("1.000.000 người") == "1000000 người"
    assert remove_thousand_separators("phiên bản 1.5") == "phiên bản 1.5"


def test_currency() -> None:
    assert convert_currency("50000đ") == "năm mươi nghìn đồng"
    assert convert_currency("200 VND") == "hai trăm đồng"
    assert convert_currency("$5") == "năm đô la"
    assert convert_currency("2,5 USD") == "hai phẩy năm đô la"


def test_percentages() -> None:
    assert convert_percentages("50%") == "năm mươi phần trăm"
    assert convert_percentages("3,5 %") == "ba phẩy năm phần trăm"


def test_phone_numbers_are_read_digit_by_digit() -> None:
    assert convert_phone_numbers("0912345678") == "không chín một hai ba bốn năm sáu bảy tám"


def test_decimals() -> None:
    assert convert_decimals("7,27") == "bảy phẩy hai mươi bảy"


def test_measurement_units_keep_the_number() -> None:
    assert convert_measurement_units("5km") == "5 ki-lô-mét"
    assert convert_measurement_units("100 km/h") == "100 ki-lô-mét trên giờ"
    assert convert_measurement_units("bảy phẩy năm kg") == "bảy phẩy năm ki-lô-gam"
    assert convert_measurement_units("30°C") == "30 độ xê"


def test_single_letter_units_need_a_clear_boundary() -> None:
    assert convert_measurement_units("5 giờ") == "5 giờ"
    assert convert_measurement_units("hai mươi") == "hai mươi"


def test_full_numeric_conversion() -> None:
    assert convert_numeric_expressions("50.000đ") == "năm mươi nghìn đồng"
    assert convert_numeric_expressions("50%") == "năm mươi phần trăm"
    assert convert_numeric_expressions("7,27") == "bảy phẩy hai mươi bảy"
    assert convert_numeric_expressions("5km") == "năm ki-lô-mét"
    assert convert_numeric_expressions("nhiệt độ -5") == "nhiệt độ âm năm"
    assert convert_numeric_expressions("có 3 con") == "có ba con"


def test_invalid_date_falls_through_to_plain_numbers() -> None:
    assert convert_numeric_expressions("13/13") == "mười ba/mười ba"


def test_spaced_ranges() -> None:
    assert convert_year_ranges("1873 - 1907") == convert_year_ranges("1873-1907")
    assert convert_dates("ngày 25 - 26/12") == convert_dates("ngày 25-26/12")


def test_converters_do_not_cross_line_breaks() -> None:
    assert convert_currency("5\nđồng hồ") == "5\nđồng hồ"
    assert convert_dates("tháng\n5") == "tháng\n5"
    assert convert_dates("ngày\n2/9/1945") == (
        "ngày\nngày hai tháng chín năm một nghìn chín trăm bốn mươi lăm"
    )
    assert convert_times("7 giờ\n30 phút") == "bảy giờ\n30 phút"
    assert convert_ordinals("thứ\n2") == "thứ\n2"
    assert convert_percentages("5\n%") == "5\n%"
