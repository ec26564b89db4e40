"""
Create workflow: from a repository choice to an issue and a branch.

The workflow is a linear sequence of steps. Any failure aborts it, and no
step after the failing one runs:

    select repository -> validate config -> build provider -> open repository
    -> check clean -> title -> labels -> create issue -> branch name
    -> materialize branch -> report

Everything that can fail without side effects (configuration, credentials,
repository state) runs before the remote issue is created. Issue creation and
branch creation are not transactional: when the branch step fails after the
issue exists, the issue is logged as orphaned and the error propagates.

Example:
    >>> workflow = CreateWorkflow(settings, HostCredentials(), ClickPrompter())
    >>> result = asyncio.run(workflow.run(title="Fix login bug"))
    >>> result.branch.name
    '42-fix-login-bug'
"""

from collections.abc import Callable
from pathlib import Path

import structlog

from tix.cli.prompts import Prompter, validate_title
from tix.config.credentials import HostCredentials
from tix.config.settings import RepositoryConfig, TixSettings
from tix.enums import BranchTarget
from tix.exceptions import ConfigurationError, GitOperationError
from tix.git.branching import BranchMaterializer
from tix.git.repository import check_clean, open_repository
from tix.models.domain import CreateResult, Issue, MaterializedBranch
from tix.naming import branch_name
from tix.providers.base import IssueProvider
from tix.providers.factory import create_issue_provider

log = structlog.get_logger(__name__)

ProviderFactory = Callable[[RepositoryConfig, HostCredentials, float], IssueProvider]


class CreateWorkflow:
    """Create an issue and a matching branch for one repository.

    Attributes:
        settings: Loaded tix configuration
        credentials: Issue host tokens and endpoints
        prompter: Where questions are asked and status is reported
        provider_factory: Builds the issue provider for a repository
        cwd: Directory used to preselect a repository
    """

    def __init__(
        self,
        settings: TixSettings,
        credentials: HostCredentials,
        prompter: Prompter,
        provider_factory: ProviderFactory = create_issue_provider,
        cwd: Path | None = None,
    ) -> None:
        self.settings = settings
        self.credentials = credentials
        self.prompter = prompter
        self.provider_factory = provider_factory
        self.cwd = cwd if cwd is not None else Path.cwd()

    async def run(self, title: str | None = None) -> CreateResult:
        """Run the workflow.

        Args:
            title: Issue title; prompted for when None or empty

        Returns:
            CreateResult describing the issue and branch

        Raises:
            ConfigurationError: Invalid repository or credentials
            RepositoryStateError: Working copy is mid-operation
            IssueHostError: The issue could not be created
            GitOperationError: The branch could not be created
        """
        repository = self._select_repository()
        host = repository.issue_host()
        log.info("repository_selected", repository=repository.name, host=host.value)

        provider = self.provider_factory(repository, self.credentials, self.settings.request_timeout)

        repo = open_repository(repository.git_basedir)
        try:
            check_clean(repo)

            issue_title = self._obtain_title(title)
            labels = self.prompter.text("Labels (comma separated)", default=repository.default_labels)

            async with provider:
                issue = await provider.create_issue(issue_title, labels)

            self.prompter.info(f"Created issue #{issue.number}: {issue.url}")

            name = branch_name(issue.number, issue.title)
            log.info("branch_name_derived", issue=issue.number, branch=name)

            branch = self._materialize(BranchMaterializer(repo), repository, issue, name)
        finally:
            repo.close()

        self._report(branch)
        return CreateResult(repository=repository.name, issue=issue, branch=branch)

    def _select_repository(self) -> RepositoryConfig:
        repositories = self.settings.repositories
        if not repositories:
            raise ConfigurationError("No repositories configured")

        if len(repositories) == 1:
            log.info("single_repository_selected", repository=repositories[0].name)
            return repositories[0]

        matched = self.settings.match_directory(self.cwd)
        name = self.prompter.select(
            "Select repository",
            self.settings.repository_names(),
            default=matched.name if matched else None,
        )
        repository = self.settings.get_repository(name)
        if repository is None:
            raise ConfigurationError(f"Unknown repository: {name}")
        return repository

    def _obtain_title(self, title: str | None) -> str:
        if not title:
            return self.prompter.text("Issue title", validate=validate_title)

        error = validate_title(title)
        if error:
            raise ConfigurationError(f"Invalid title: {error}")
        self.prompter.info(f"Using title: {title}")
        return title

    def _materialize(
        self,
        materializer: BranchMaterializer,
        repository: RepositoryConfig,
        issue: Issue,
        name: str,
    ) -> MaterializedBranch:
        if repository.worktree.enabled:
            target = BranchTarget.WORKTREE
            worktree_path: Path | None = repository.worktree_dir(name)
        else:
            target = BranchTarget.IN_PLACE
            worktree_path = None

        try:
            branch = materializer.materialize(repository.default_branch, name, target, worktree_path)
        except GitOperationError as e:
            log.error(
                "orphaned_issue",
                repository=repository.name,
                issue=issue.number,
                url=issue.url,
                branch=name,
                error=e.message,
            )
            raise

        log.info("branch_materialized", branch=branch.name, target=target.value, commit=branch.commit)
        return branch

    def _report(self, branch: MaterializedBranch) -> None:
        if branch.worktree_path is not None:
            self.prompter.info(f"Worktree created: branch {branch.name} in {branch.worktree_path}")
        else:
            self.prompter.info(f"Branch created: {branch.name}")
