import json

from scripts.score_document import main


def test_scores_files_and_writes_json(tmp_path, capsys, resume_text, job_description):
    document = tmp_path / "resume.txt"
    job = tmp_path / "job.txt"
    output = tmp_path / "reports" / "ats.json"
    document.write_text(resume_text)
    job.write_text(job_description)

    exit_code = main([
        "--document", str(document),
        "--job", str(job),
        "--output", str(output),
    ])

    assert exit_code == 0
    assert "ATS COMPATIBILITY SCORE" in capsys.readouterr().out
    data = json.loads(output.read_text())
    assert data["documentType"] == "resume"
    assert data["breakdown"]["jobTitleMatch"] == 100.0


def test_cover_letter_from_html_job(tmp_path, capsys, cover_letter):
    document = tmp_path / "letter.txt"
    job = tmp_path / "job.html"
    document.write_text(cover_letter)
    job.write_text("<p>Company: Acme Analytics</p><p>Python developer</p>")

    exit_code = main(["--document", str(document), "--job", str(job), "--type", "cover-letter"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Call to action:  yes" in out


def test_missing_file(tmp_path, capsys):
    exit_code = main(["--document", str(tmp_path / "nope.txt"), "--job", str(tmp_path / "job.txt")])

    assert exit_code == 1
    assert "File not found" in capsys.readouterr().out
