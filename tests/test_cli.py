from loancalc.cli import main


class TestCli:
    def test_summary_report(self, capsys):
        assert main(["300000", "6", "30", "--start", "2025-01-01"]) == 0
        out = capsys.readouterr().out
        assert "Loan Summary" in out
        assert "$1,798.65" in out
        assert "2054-12-01" in out

    def test_yearly_schedule(self, capsys):
        assert main(["300000", "6", "30", "--start", "2025-01-01", "--extra", "200", "--schedule"]) == 0
        out = capsys.readouterr().out
        assert "Yearly Schedule" in out
        assert "Time saved" in out

    def test_invalid_input(self, capsys):
        assert main(["0", "6", "30"]) == 1
        assert "valid loan amount" in capsys.readouterr().err
