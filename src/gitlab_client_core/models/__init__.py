"""Validated response records for the GitLab REST API.

Every record derives from :class:`Record`, which keeps undeclared fields, and
every list call returns a :class:`Page` envelope.
"""

from gitlab_client_core.models.base import Page, Record
from gitlab_client_core.models.groups import Group
from gitlab_client_core.models.issues import Discussion, Issue, Label, Milestone, Note
from gitlab_client_core.models.inputs import DiffPosition, FileAction, PipelineVariable
from gitlab_client_core.models.merge_requests import (
    MergeRequest,
    MergeRequestApprovals,
    MergeRequestChanges,
    RebaseStatus,
)
from gitlab_client_core.models.pipelines import (
    CILintResponse,
    CIValidationResult,
    Environment,
    Job,
    Pipeline,
)
from gitlab_client_core.models.projects import (
    Branch,
    Commit,
    CompareResult,
    Event,
    FileContent,
    FileWriteResult,
    Project,
    ProjectDetail,
    ProtectedBranch,
    Release,
    Tag,
    TreeEntry,
)
from gitlab_client_core.models.users import Member, User, UserDetail
from gitlab_client_core.models.wikis import WikiAttachment, WikiPage

__all__ = [
    "Branch",
    "CILintResponse",
    "CIValidationResult",
    "Commit",
    "CompareResult",
    "DiffPosition",
    "Discussion",
    "Environment",
    "Event",
    "FileAction",
    "FileContent",
    "FileWriteResult",
    "Group",
    "Issue",
    "Job",
    "Label",
    "Member",
    "MergeRequest",
    "MergeRequestApprovals",
    "MergeRequestChanges",
    "Milestone",
    "Note",
    "Page",
    "Pipeline",
    "PipelineVariable",
    "Project",
    "ProjectDetail",
    "ProtectedBranch",
    "RebaseStatus",
    "Record",
    "Release",
    "Tag",
    "TreeEntry",
    "User",
    "UserDetail",
    "WikiAttachment",
    "WikiPage",
]
