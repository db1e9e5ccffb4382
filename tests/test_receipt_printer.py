"""ConsoleReceiptPrinterのテスト"""
import io
from datetime import datetime

from src.domain.entities.article import Article
from src.infrastructure.console.receipt_printer import ConsoleReceiptPrinter


def test_print_header(printer: ConsoleReceiptPrinter, output: io.StringIO):
    """ヘッダーはタイトルを大文字で出力し、空行で終わる"""
    printer.print_header("Papelería Central", 1)

    assert output.getvalue() == (
        "\n===== TICKET DE COMPRA =====\n"
        "Tienda: Papelería Central\n"
        "Caja Nº: 1\n"
        "Fecha: 16/10/2025, 18:45:07\n"
        "\n"
    )


def test_print_header_truncates_register_number(printer: ConsoleReceiptPrinter, output: io.StringIO):
    """小数のレジ番号は切り捨てる"""
    printer.print_header("Papelería Central", 2.9)

    assert "Caja Nº: 2\n" in output.getvalue()


def test_print_header_reads_clock_each_time(output: io.StringIO):
    """日時は印字のたびに時計から取得する"""
    instants = iter([datetime(2025, 1, 2, 3, 4, 5), datetime(2025, 12, 31, 23, 59, 59)])
    printer = ConsoleReceiptPrinter("Ticket", stream=output, clock=lambda: next(instants))

    printer.print_header("Tienda", 1)
    printer.print_header("Tienda", 1)

    text = output.getvalue()
    assert "Fecha: 02/01/2025, 03:04:05" in text
    assert "Fecha: 31/12/2025, 23:59:59" in text


def test_print_article(printer: ConsoleReceiptPrinter, output: io.StringIO, pen: Article):
    """商品の要約行を1行出力する"""
    printer.print_article(pen)

    assert output.getvalue() == pen.summary() + "\n"


def test_print_total(printer: ConsoleReceiptPrinter, output: io.StringIO):
    """合計行と締めの罫線"""
    printer.print_total(26.46)

    assert output.getvalue() == (
        "\n"
        "TOTAL A PAGAR: 26.46 €\n"
        "=====================================\n"
        "\n"
    )


def test_print_total_custom_currency(output: io.StringIO, fixed_clock):
    """通貨記号を変更できる"""
    printer = ConsoleReceiptPrinter("Ticket", stream=output, clock=fixed_clock, currency_symbol="EUR")
    printer.print_total(5)

    assert "TOTAL A PAGAR: 5.00 EUR\n" in output.getvalue()


def test_defaults_to_stdout(capsys, fixed_clock):
    """出力先を省略すると標準出力に書き込む"""
    printer = ConsoleReceiptPrinter("Ticket de Compra", clock=fixed_clock)
    printer.print_total(1.5)

    captured = capsys.readouterr()
    assert "TOTAL A PAGAR: 1.50 €" in captured.out
    assert captured.err == ""


def test_title_is_kept(printer: ConsoleReceiptPrinter):
    """タイトルは生成時の値のまま"""
    printer.print_header("Tienda", 1)
    assert printer.title == "Ticket de Compra"
