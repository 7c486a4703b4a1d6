"""Pipeline state models shared across all stages."""

from __future__ import annotations

from dataclasses import dataclass, field

from core.errors import PrerequisiteError

# Flags a stage may set. Once True they stay True.
FLAGS = (
    "success",
    "repository_created",
    "framework_initialized",
    "website_generated",
    "content_generated",
    "styling_completed",
    "deployment_ready",
)


@dataclass
class ExtractedInfo:
    purpose: str | None = None
    target_audience: str | None = None
    business_objectives: str | None = None

    def to_dict(self):
        """Only the fields that were found; absent ones are omitted."""
        return {k: v for k, v in vars(self).items() if v is not None}


@dataclass
class RemoteFile:
    path: str           # repository-relative e.g. "src/App.tsx"
    content: str
    sha: str | None = None


@dataclass
class FileOutcome:
    path: str
    action: str         # "created", "updated", "failed"
    error: str | None = None


@dataclass
class StageResult:
    stage: str
    files: list[FileOutcome] = field(default_factory=list)

    @property
    def written(self):
        return [f.path for f in self.files if f.action != "failed"]

    @property
    def failed(self):
        return [f.path for f in self.files if f.action == "failed"]


@dataclass
class PipelineState:
    requirements: str
    project_name: str = ""
    extracted_info: ExtractedInfo = field(default_factory=ExtractedInfo)
    business_type: str = ""
    industry: str = ""
    color_scheme: str = "blue"
    style: str = "modern"
    features: list[str] = field(default_factory=list)
    repository_url: str = ""
    repository_name: str = ""
    owner: str = ""
    success: bool = False
    repository_created: bool = False
    framework_initialized: bool = False
    website_generated: bool = False
    components_created: list[str] = field(default_factory=list)
    content_generated: bool = False
    styling_completed: bool = False
    deployment_ready: bool = False
    stages: list[StageResult] = field(default_factory=list)
    status: str = "pending"             # pending|running|done|failed
    errors: list[str] = field(default_factory=list)

    def mark(self, *flags):
        """Set completion flags. Flags are never cleared."""
        for flag in flags:
            if flag not in FLAGS:
                raise ValueError(f"Unknown pipeline flag: {flag}")
            setattr(self, flag, True)

    def require(self, *flags, stage=None, message=None):
        """Raise PrerequisiteError unless every named flag is True."""
        missing = [f for f in flags if getattr(self, f, None) is not True]
        if missing:
            detail = message or "Prerequisite stage did not complete"
            raise PrerequisiteError(
                f"{detail} (missing: {', '.join(missing)})", stage=stage,
            )

    def stage_result(self, name):
        for result in self.stages:
            if result.stage == name:
                return result
        return None

    def to_dict(self):
        """JSON-safe summary of the run."""
        return {
            "project_name": self.project_name,
            "extracted_info": self.extracted_info.to_dict(),
            "business_type": self.business_type,
            "industry": self.industry,
            "color_scheme": self.color_scheme,
            "style": self.style,
            "repository_url": self.repository_url,
            "repository_name": self.repository_name,
            "owner": self.owner,
            "flags": {f: getattr(self, f) for f in FLAGS},
            "components_created": list(self.components_created),
            "stages": [
                {
                    "stage": s.stage,
                    "written": s.written,
                    "failed": s.failed,
                }
                for s in self.stages
            ],
            "status": self.status,
            "errors": list(self.errors),
        }
