from mnacircuit.cli import main


def test_main_runs_and_writes_files(tmp_path, capsys):
    assert main(["--output-dir", str(tmp_path)]) == 0
    names = sorted(p.name for p in tmp_path.iterdir())
    assert names == [
        "Cuboid_ResistanceSweep.txt",
        "RLC_phase_frequency_sweep.txt",
        "RLC_power_frequency_sweep.txt",
        "WienBridge_FreqSweep.txt",
    ]


def test_main_output_sections(tmp_path, capsys):
    main(["--output-dir", str(tmp_path)])
    out = capsys.readouterr().out
    assert "Empty circuit" in out
    assert "Example 2: RLC Circuit" in out
    assert "Example 3: Wien Bridge Circuit" in out
    assert "Example 4: Cuboid of resistors" in out
    assert "Rtot0.5 cis" in out


def test_main_copied_circuit_reports_same_data(tmp_path, capsys):
    main(["--output-dir", str(tmp_path)])
    out = capsys.readouterr().out
    assert out.count("Frequency: 150 Hz") == 2
    assert out.count("Voltage: 100 cis 0 pi V") == 2