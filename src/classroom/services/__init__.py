from src.classroom.services.assignment_service import AssignmentService
from src.classroom.services.github_client import (
    GitHubClient,
    RemoteError,
    RepositoryClient,
    RepositoryMetadata,
)
from src.classroom.services.starter_code_validator import StarterCodeValidator
from src.classroom.services.uniqueness_checker import UniquenessChecker
from src.classroom.services.validation_pipeline import (
    AssignmentValidationPipeline,
    github_client_for,
)

__all__ = [
    "AssignmentService",
    "AssignmentValidationPipeline",
    "GitHubClient",
    "RemoteError",
    "RepositoryClient",
    "RepositoryMetadata",
    "StarterCodeValidator",
    "UniquenessChecker",
    "github_client_for",
]
