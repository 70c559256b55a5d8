"""Tests for remote URL parsing."""

from __future__ import annotations

import pytest

from pr_opener.errors import AzureUrlParseError, UrlParseError
from pr_opener.models.repository import AzureProject, OwnerRepo
from pr_opener.url_parser import parse_azure_url, parse_git_url


class TestParseGitUrl:
    """Tests for parse_git_url."""

    @pytest.mark.parametrize(
        "url",
        [
            "git@github.com:acme/widget.git",
            "git@github.com:acme/widget",
            "https://github.com/acme/widget.git",
            "https://github.com/acme/widget",
            "https://github.com/acme/widget/",
            "ssh://git@github.com/acme/widget.git",
            "ssh://git@github.com:2222/acme/widget.git",
            "https://user@bitbucket.org/acme/widget.git",
            "http://gitlab.com/acme/widget.git",
        ],
    )
    def test_ssh_and_https_forms_agree(self, url: str) -> None:
        """Every supported form of the same path yields the same pair."""
        assert parse_git_url(url) == OwnerRepo(owner="acme", repository="widget")

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert parse_git_url("  git@gitlab.com:acme/widget.git\n").owner == "acme"

    def test_ssh_nested_path_keeps_remainder_as_repository(self) -> None:
        result = parse_git_url("git@gitlab.com:group/subgroup/widget.git")

        assert result.owner == "group"
        assert result.repository == "subgroup/widget"

    def test_https_nested_path_matches_ssh(self) -> None:
        ssh = parse_git_url("git@gitlab.com:group/subgroup/widget.git")
        https = parse_git_url("https://gitlab.com/group/subgroup/widget.git")

        assert ssh == https

    def test_repeated_git_suffix_is_stripped(self) -> None:
        assert parse_git_url("git@github.com:acme/widget.git.git").repository == "widget"

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "not a url",
            "/srv/git/widget.git",
            "https://github.com/widget",
            "git@github.com:widget",
            "git@github.com:acme/.git",
        ],
    )
    def test_unparseable_urls_raise(self, url: str) -> None:
        with pytest.raises(UrlParseError, match="Could not parse git URL"):
            parse_git_url(url)


class TestParseAzureUrl:
    """Tests for parse_azure_url."""

    def test_dev_azure_https_with_repository(self) -> None:
        result = parse_azure_url("https://dev.azure.com/contoso/webapp/_git/frontend")

        assert result == AzureProject(
            organization="contoso", project="webapp", repository="frontend"
        )

    def test_dev_azure_https_with_user_info(self) -> None:
        result = parse_azure_url("https://contoso@dev.azure.com/contoso/webapp/_git/frontend")

        assert result.organization == "contoso"
        assert result.repository == "frontend"

    def test_dev_azure_without_repository(self) -> None:
        result = parse_azure_url("https://dev.azure.com/acme/widget")

        assert result == AzureProject(organization="acme", project="widget")

    def test_legacy_visualstudio_url(self) -> None:
        result = parse_azure_url("https://contoso.visualstudio.com/webapp/_git/frontend")

        assert result.organization == "contoso"
        assert result.project == "webapp"
        assert result.repository == "frontend"

    def test_legacy_visualstudio_url_with_default_collection(self) -> None:
        result = parse_azure_url(
            "https://contoso.visualstudio.com/DefaultCollection/webapp/_git/frontend"
        )

        assert result == AzureProject(
            organization="contoso", project="webapp", repository="frontend"
        )

    @pytest.mark.parametrize(
        "url",
        [
            "git@ssh.dev.azure.com:v3/contoso/webapp/frontend",
            "contoso@vs-ssh.visualstudio.com:v3/contoso/webapp/frontend",
        ],
    )
    def test_ssh_urls(self, url: str) -> None:
        assert parse_azure_url(url) == AzureProject(
            organization="contoso", project="webapp", repository="frontend"
        )

    def test_non_azure_url_raises(self) -> None:
        with pytest.raises(AzureUrlParseError, match="Could not parse Azure DevOps URL"):
            parse_azure_url("https://github.com/acme/widget.git")

    def test_azure_error_is_a_url_parse_error(self) -> None:
        with pytest.raises(UrlParseError):
            parse_azure_url("https://dev.azure.com/acme/widget/extra")
