def format_success(results, queries_used):
    """
    Format the final output with the summarized articles.
    """
    return {
        "status": "success",
        "results": results,
        "queriesUsed": queries_used,
        "totalArticles": len(results),
    }


def format_empty(message):
    return {"status": "success", "results": [], "message": message}


def format_error(message):
    return {"status": "error", "error": message, "results": []}
