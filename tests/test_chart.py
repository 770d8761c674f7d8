import pytest

from pengiriman.chart import BAR_GAP, MARGIN, BarChart


def make_chart():
    chart = BarChart()
    chart.set_data(["Jakarta", "Bandung", "Malang"], [30, 15, 30])
    return chart


def test_empty_chart_has_no_bars():
    assert BarChart().layout(400, 300) == []


def test_mismatched_data_rejected():
    with pytest.raises(ValueError):
        BarChart().set_data(["a", "b"], [1])


def test_tallest_bar_fills_chart_area():
    bars = make_chart().layout(400, 300)
    assert bars[0].top == MARGIN
    assert all(bar.bottom == 300 - MARGIN for bar in bars)


def test_bars_keep_label_order_and_width():
    bars = make_chart().layout(400, 300)
    assert [bar.label for bar in bars] == ["Jakarta", "Bandung", "Malang"]
    widths = {bar.right - bar.left for bar in bars}
    assert len(widths) == 1
    step = bars[1].left - bars[0].left
    assert widths == {step - BAR_GAP}
    assert bars[0].left == MARGIN


def test_bar_height_proportional():
    bars = make_chart().layout(400, 300)
    assert bars[1].height * 2 == bars[0].height
    assert bars[0].height == bars[2].height


def test_zero_maximum_rejected():
    chart = BarChart()
    chart.set_data(["x"], [0])
    with pytest.raises(ValueError):
        chart.layout(200, 200)


def test_clear_keeps_title():
    chart = make_chart()
    chart.set_title("Statistik")
    chart.clear()
    assert chart.title == "Statistik"
    assert chart.labels == [] and chart.values == []
    assert chart.layout(400, 300) == []