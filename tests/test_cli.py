import json

import pytest
import yaml

from resume_builder.cli import main, parse_args

JOB_DESCRIPTION = (
    "Looking for a React developer with 5 years experience "
    "and strong communication skills"
)


@pytest.fixture(autouse=True)
def no_scoring_config(monkeypatch, tmp_path):
    monkeypatch.setenv("ATS_SCORING_CONFIG", str(tmp_path / "missing.yaml"))


@pytest.fixture
def resume_file(tmp_path, resume_dict):
    path = tmp_path / "resume.yaml"
    path.write_text(yaml.safe_dump(resume_dict), encoding="utf-8")
    return path


@pytest.fixture
def job_file(tmp_path):
    path = tmp_path / "job.txt"
    path.write_text(JOB_DESCRIPTION, encoding="utf-8")
    return path


class TestCli:

    def test_report(self, resume_file, job_file, capsys):
        exit_code = main(["--resume", str(resume_file), "--job", str(job_file)])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "ATS COMPATIBILITY SCORE" in out
        assert "KEYWORDS (1/3 matched)" in out
        assert 'related to "communication"' in out

    def test_json_output(self, resume_file, job_file, capsys):
        exit_code = main([
            "--resume", str(resume_file), "--job", str(job_file), "--json"
        ])

        assert exit_code == 0
        result = json.loads(capsys.readouterr().out)
        assert result["keywordMatchScore"] == 33
        assert result["matchedKeywords"] == ["react"]
        assert result["missingKeywords"] == ["communication", "years experience"]

    def test_json_resume_file(self, tmp_path, resume_dict, job_file, capsys):
        path = tmp_path / "resume.json"
        path.write_text(json.dumps(resume_dict), encoding="utf-8")

        assert main(["--resume", str(path), "--job", str(job_file), "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["formatScore"] == 100

    def test_writes_output_file(self, resume_file, job_file, tmp_path):
        output = tmp_path / "reports" / "score.json"

        exit_code = main([
            "--resume", str(resume_file), "--job", str(job_file),
            "--output", str(output)
        ])

        assert exit_code == 0
        assert json.loads(output.read_text())["sectionCompletenessScore"] == 100

    def test_strict_policy(self, resume_file, job_file, capsys):
        main([
            "--resume", str(resume_file), "--job", str(job_file),
            "--policy", "strict", "--json"
        ])

        # 33*0.5 + 100*0.25 + 100*0.25
        assert json.loads(capsys.readouterr().out)["overallScore"] == 67

    def test_missing_resume_file(self, job_file, tmp_path, capsys):
        exit_code = main([
            "--resume", str(tmp_path / "nope.yaml"), "--job", str(job_file)
        ])

        assert exit_code == 1
        assert "Resume file not found" in capsys.readouterr().err

    def test_invalid_resume_rejected(self, tmp_path, resume_dict, job_file, capsys):
        resume_dict["personalInfo"]["phone"] = ""
        path = tmp_path / "resume.yaml"
        path.write_text(yaml.safe_dump(resume_dict), encoding="utf-8")

        exit_code = main(["--resume", str(path), "--job", str(job_file)])

        assert exit_code == 1
        err = capsys.readouterr().err
        assert "ERROR: Missing phone" in err
        assert "--no-validate" in err

    def test_no_validate_scores_anyway(self, tmp_path, job_file, capsys):
        path = tmp_path / "resume.yaml"
        path.write_text(yaml.safe_dump({"summary": "React developer"}), encoding="utf-8")

        exit_code = main([
            "--resume", str(path), "--job", str(job_file), "--no-validate", "--json"
        ])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["formatScore"] == 40

    def test_bad_scoring_config(self, resume_file, job_file, tmp_path, capsys):
        config = tmp_path / "scoring.yaml"
        config.write_text(yaml.safe_dump({"scoring": {"keyword_weight": 0.9}}))

        exit_code = main([
            "--resume", str(resume_file), "--job", str(job_file),
            "--config", str(config)
        ])

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().err

    def test_unknown_policy_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            parse_args(["--resume", "r.yaml", "--job", "j.txt", "--policy", "lenient"])

    def test_malformed_scoring_config(self, resume_file, job_file, tmp_path, capsys):
        config = tmp_path / "scoring.yaml"
        config.write_text("scoring:\n  keyword_weight: '0.6'\n")

        exit_code = main([
            "--resume", str(resume_file), "--job", str(job_file),
            "--config", str(config)
        ])

        assert exit_code == 1
        assert "Scoring weights must be numbers" in capsys.readouterr().err
