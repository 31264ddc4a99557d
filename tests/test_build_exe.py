import build_exe


def test_nuitka_args_onefile():
    args = build_exe.nuitka_args(debug=False, package=True)
    assert args[1:3] == ["-m", "nuitka"]
    assert args[3].endswith("main.py")
    assert "--onefile" in args and "--standalone" in args
    assert "--include-package=debugpy" not in args


def test_nuitka_args_debug_folder():
    args = build_exe.nuitka_args(debug=True, package=False)
    assert "--follow-imports" in args
    assert "--include-package=debugpy" in args
