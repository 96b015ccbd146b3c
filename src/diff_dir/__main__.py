from diff_dir.diff_dir import app

app(prog_name="diff-dir")
