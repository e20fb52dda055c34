"""Candidate predicates applied before ranking, one per validation context."""

_TEST_FILE_MARKERS = (".test.", ".spec.")


def is_valid_named_candidate(
    candidate: str,
    user_input: str,
    exclude_default: bool,
) -> bool:
    """Private names, the query itself and optionally ``default`` are never suggested."""
    if not candidate:
        return False
    if candidate.startswith("_"):
        return False
    if candidate == user_input:
        return False
    if exclude_default and candidate == "default":
        return False
    return True


def is_valid_import_candidate(candidate: str, user_input: str) -> bool:
    return is_valid_named_candidate(candidate, user_input, exclude_default=False)


def is_valid_export_candidate(candidate: str, user_input: str) -> bool:
    return is_valid_named_candidate(candidate, user_input, exclude_default=True)


def is_valid_identifier_candidate(candidate: str, user_input: str) -> bool:
    # Internal well-known symbols surface as "__@iterator@12" and the like
    return bool(candidate) and not candidate.startswith("__") and candidate != user_input


def is_valid_module_candidate(candidate: str, user_input: str) -> bool:
    """Relative specifiers only; dotfiles and test files are not suggested."""
    if not candidate or candidate == user_input:
        return False
    if candidate.startswith(".") and not candidate.startswith(("./", "../")):
        return False
    return not is_test_file(candidate)


def is_test_file(path: str) -> bool:
    return any(marker in path for marker in _TEST_FILE_MARKERS)
