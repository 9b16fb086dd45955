"""Resource groups composed by :class:`gitlab_client_core.client.GitLabClient`."""

from gitlab_client_core.resources.base import Resource
from gitlab_client_core.resources.groups import GroupsResource
from gitlab_client_core.resources.issues import IssuesResource
from gitlab_client_core.resources.labels import LabelsResource
from gitlab_client_core.resources.merge_requests import MergeRequestsResource
from gitlab_client_core.resources.pipelines import PipelinesResource
from gitlab_client_core.resources.projects import ProjectsResource
from gitlab_client_core.resources.repository import RepositoryResource
from gitlab_client_core.resources.users import UsersResource
from gitlab_client_core.resources.wikis import WikisResource

__all__ = [
    "GroupsResource",
    "IssuesResource",
    "LabelsResource",
    "MergeRequestsResource",
    "PipelinesResource",
    "ProjectsResource",
    "RepositoryResource",
    "Resource",
    "UsersResource",
    "WikisResource",
]
