from __future__ import annotations

from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel

from errorfinder.capability import resolve_error_capability
from errorfinder.config import Config
from errorfinder.errors import LoadError
from errorfinder.model import ScanResult
from errorfinder.pipeline import scan
from errorfinder.report import render_report


app = FastAPI(title="Error Finder")

CAPABILITY = resolve_error_capability()


class ScanRequest(BaseModel):
	patterns: List[str] = []


def _scan(req: ScanRequest) -> ScanResult:
	try:
		return scan(req.patterns, CAPABILITY, Config.from_env())
	except LoadError as e:
		raise HTTPException(status_code=400, detail=str(e)) from e


@app.post("/scan", response_model=ScanResult)
def scan_json(req: ScanRequest) -> ScanResult:
	return _scan(req)


@app.post("/scan.csv")
def scan_csv(req: ScanRequest) -> Response:
	result = _scan(req)
	return Response(content=render_report(result.definitions), media_type="text/csv")
