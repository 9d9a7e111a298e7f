import logging

from django.http import HttpResponse, JsonResponse
from django.utils.html import escape
from django.views.decorators.http import require_GET

from catalog_app.navigation.state import NavigationState, next_target, previous_target
from catalog_app.services.movie_page_service import InvalidPageError, MoviePageService, MoviePageServiceError

logger = logging.getLogger(__name__)


def _parse_page(request) -> int:
    """Read the zero-based ?page= parameter. Absent or empty means page 0."""
    raw_page = request.GET.get("page", "").strip()
    if not raw_page:
        return 0
    # int() would also take signs, underscores and non-ASCII digits
    if not (raw_page.isascii() and raw_page.isdigit()):
        raise InvalidPageError(f"Page must be a non-negative integer, got '{raw_page}'")
    return int(raw_page)


@require_GET
def movies_api(request):
    """Return one page of movies sorted by title as JSON."""
    try:
        page = _parse_page(request)
        result = MoviePageService().get_page(page)
    except InvalidPageError as e:
        return JsonResponse({"error": str(e)}, status=400)
    except MoviePageServiceError as e:
        return JsonResponse({"error": str(e)}, status=500)

    return JsonResponse(result.to_json())


@require_GET
def movie_list(request):
    """Return the current page of movies with Previous/Next navigation."""
    try:
        page = _parse_page(request)
        result = MoviePageService().get_page(page)
    except InvalidPageError as e:
        return HttpResponse(f"<h1>Invalid page</h1><p>{escape(str(e))}</p>", status=400)
    except MoviePageServiceError:
        logger.exception("Could not render movie list page")
        return HttpResponse("<h1>Movies are unavailable right now</h1>", status=500)

    state = NavigationState(current_page=page, total_count=result.total_count, items=result.items)

    rows_html = ""
    for movie in state.items:
        score = movie.imdb_score if movie.imdb_score is not None else ""
        rows_html += f"""
        <div class="movie-row">
            <div class="movie-title">{escape(movie.movie_title or "")}</div>
            <div class="movie-score">{score}</div>
        </div>
        """
    if not state.items:
        rows_html = '<p class="no-movies">No movies on this page</p>'

    html = f"""
    <!DOCTYPE html>
    <html>
    <head>
        <title>Top Rated Movies</title>
        <style>
            body {{ font-family: -apple-system, BlinkMacSystemFont, sans-serif; margin: 0; background: #f0f0f0; color: #333; }}
            .content {{ max-width: 800px; margin: 0 auto; padding: 32px 40px; }}
            h1 {{ margin-top: 0; }}
            .movie-row {{ display: flex; justify-content: space-between; background: #fff; padding: 12px 16px; border-bottom: 1px solid #eee; }}
            .movie-title {{ font-weight: 600; }}
            .movie-score {{ color: #e63946; }}
            .no-movies {{ color: #888; font-style: italic; }}
            .page-container {{ display: flex; justify-content: space-between; align-items: center; margin-top: 24px; }}
            .page-container a {{ color: #e63946; text-decoration: none; }}
            .page-total {{ color: #666; }}
        </style>
    </head>
    <body>
        <div class="content">
            <h1>Top Rated Movies</h1>
            {rows_html}
            <div class="page-container">
                <a class="page-previous" href="?page={previous_target(state)}">Previous</a>
                <div class="page-total">Total: {state.total_count}, page {state.current_page} of {state.last_page}</div>
                <a class="page-next" href="?page={next_target(state)}">Next</a>
            </div>
        </div>
    </body>
    </html>
    """
    return HttpResponse(html)
