"""Repository provisioning policy for assignments."""

from enum import Enum


class ProvisioningStrategy(str, Enum):
    """How student repositories are created from starter code."""

    NONE = "none"
    TEMPLATE_CLONE = "template-clone"
    IMPORT = "import"


def use_template_repos(has_starter_code: bool, template_repos_enabled: bool) -> bool:
    return has_starter_code and template_repos_enabled


def use_importer(has_starter_code: bool, template_repos_enabled: bool) -> bool:
    return has_starter_code and not template_repos_enabled


def resolve_strategy(has_starter_code: bool, template_repos_enabled: bool) -> ProvisioningStrategy:
    """Pick the provisioning strategy.

    | has_starter_code | template_repos_enabled | strategy       |
    |------------------|------------------------|----------------|
    | False            | any                    | none           |
    | True             | True                   | template-clone |
    | True             | False                  | import         |
    """
    if use_template_repos(has_starter_code, template_repos_enabled):
        return ProvisioningStrategy.TEMPLATE_CLONE
    if use_importer(has_starter_code, template_repos_enabled):
        return ProvisioningStrategy.IMPORT
    return ProvisioningStrategy.NONE
