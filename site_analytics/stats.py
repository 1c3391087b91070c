"""
Aggregations behind the analytics dashboard.
"""
import logging
import uuid
from collections import Counter
from datetime import timedelta

from django.db.models import Count
from django.db.models.functions import TruncDate
from django.utils import timezone

from portfolio.models import Project
from portfolio_backend.utils import safe_json_list
from .models import AnalyticsEvent

logger = logging.getLogger(__name__)

DEFAULT_PERIOD_DAYS = 30
MAX_PERIOD_DAYS = 3650
TOP_N = 10


def parse_period(raw) -> int:
    """Days to look back; anything unparsable or non-positive means the default."""
    try:
        days = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_PERIOD_DAYS
    if days < 1:
        return DEFAULT_PERIOD_DAYS
    return min(days, MAX_PERIOD_DAYS)


def _project_titles(project_ids):
    valid_ids = []
    for raw in project_ids:
        try:
            valid_ids.append(uuid.UUID(str(raw)))
        except ValueError:
            continue
    titles = dict(Project.objects.filter(pk__in=valid_ids).values_list('pk', 'title'))
    return {str(pk): title for pk, title in titles.items()}


def technology_breakdown(limit=TOP_N):
    """
    Most used technologies across all projects.
    percentage = share of projects listing the technology, rounded.
    """
    technology_lists = list(Project.objects.values_list('technologies', flat=True))
    total_projects = len(technology_lists)
    if not total_projects:
        return []

    counts = Counter()
    for technologies in technology_lists:
        # count each technology once per project
        counts.update({str(name) for name in safe_json_list(technologies) if name})

    return [
        {'name': name, 'count': count, 'percentage': round(count / total_projects * 100)}
        for name, count in counts.most_common(limit)
    ]


def build_stats(period_days: int, now=None) -> dict:
    now = now or timezone.now()
    since = now - timedelta(days=period_days)
    events = AnalyticsEvent.objects.filter(timestamp__gte=since)
    page_views = events.filter(event_type=AnalyticsEvent.PAGE_VIEW)
    project_clicks = events.filter(event_type=AnalyticsEvent.PROJECT_CLICK)

    daily_views = (
        page_views.annotate(date=TruncDate('timestamp'))
        .values('date')
        .annotate(views=Count('id'))
        .order_by('date')
    )
    top_pages = (
        page_views.exclude(page__isnull=True).exclude(page='')
        .values('page')
        .annotate(views=Count('id'))
        .order_by('-views', 'page')[:TOP_N]
    )
    top_projects = list(
        project_clicks.exclude(project_id__isnull=True).exclude(project_id='')
        .values('project_id')
        .annotate(clicks=Count('id'))
        .order_by('-clicks', 'project_id')[:TOP_N]
    )
    titles = _project_titles(row['project_id'] for row in top_projects)
    top_countries = (
        events.exclude(country__isnull=True).exclude(country='')
        .values('country')
        .annotate(visits=Count('id'))
        .order_by('-visits', 'country')[:TOP_N]
    )

    return {
        'period': period_days,
        'overview': {
            'totalViews': page_views.count(),
            'totalProjectClicks': project_clicks.count(),
            'totalContactForms': events.filter(event_type=AnalyticsEvent.CONTACT_FORM).count(),
            'totalProjects': Project.objects.count(),
        },
        'dailyViews': [
            {'date': row['date'].isoformat(), 'views': row['views']} for row in daily_views
        ],
        'topPages': [{'page': row['page'], 'views': row['views']} for row in top_pages],
        'topProjects': [
            {
                'projectId': row['project_id'],
                'title': titles.get(str(row['project_id']).lower(), 'Unknown project'),
                'clicks': row['clicks'],
            }
            for row in top_projects
        ],
        'technologies': technology_breakdown(),
        'topCountries': [{'country': row['country'], 'visits': row['visits']} for row in top_countries],
    }
