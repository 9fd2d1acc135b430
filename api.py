from __future__ import annotations

from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from doccheck.config import CheckConfig
from doccheck.errors import InputError
from doccheck.model import FileError, Finding, Summary
from doccheck.runner import check_paths
from doccheck.summarize import summarize_report


app = FastAPI(title="require-javadoc")


class CheckRequest(BaseModel):
	paths: List[str] = []
	config: CheckConfig = CheckConfig()


class CheckResponse(BaseModel):
	findings: List[Finding]
	errors: List[FileError]
	summary: Summary
	exit_code: int


@app.post("/check", response_model=CheckResponse)
def check(req: CheckRequest) -> CheckResponse:
	try:
		report = check_paths(req.paths, req.config)
	except InputError as e:
		raise HTTPException(status_code=400, detail=str(e))

	return CheckResponse(
		findings=report.findings,
		errors=report.errors,
		summary=summarize_report(report),
		exit_code=report.exit_code,
	)


def create_app() -> FastAPI:
	return app
