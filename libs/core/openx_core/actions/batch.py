from openx_core.models.actions import ActionResult


def aggregate_results(
    results: list[tuple[str, ActionResult]],
    verb: str,
    done: str,
) -> ActionResult:
    """Fold per-target results into one batch result.

    Args:
        results: (target name, result) pairs in the order they ran
        verb: Verb used in the failure summary ("close", "launch")
        done: Prefix of the success summary ("Closed", "Launched")

    Returns:
        ActionResult failing if any target failed, with every per-target
        outcome in data["results"]
    """
    failed = [name for name, result in results if not result.success]
    data = {
        "results": [
            {"name": name, "success": result.success, "message": result.message}
            for name, result in results
        ]
    }

    if failed:
        return ActionResult(
            success=False,
            message=f"{len(failed)} apps failed to {verb}",
            data=data,
        )

    names = ", ".join(name for name, _ in results)
    return ActionResult(
        success=True,
        message=f"{done}: {names}" if names else "Nothing to do",
        data=data,
    )
