import logging
from datetime import timedelta
import pytest

from carthi.analytics import stats
from carthi.analytics.leaderboard import build_leaderboard, salesperson_stats
from carthi.analytics.schemas import DateRange, LeadFilters, StatusBucket
from carthi.analytics.service import build_dashboard
from carthi.leads.models import LeadStatus


def distribution(leads):
    return {entry.bucket: (entry.count, entry.percentage) for entry in stats.status_distribution(leads)}


def test_closed_deals_example(make_lead):
    leads = [
        make_lead("L001", LeadStatus.CLOSED, final_offer_price=500000),
        make_lead("L002", LeadStatus.CLOSED, final_offer_price=300000),
        make_lead("L003", LeadStatus.NEW),
    ]
    assert stats.total_revenue(leads) == 800000
    assert stats.count_by_status(leads, LeadStatus.CLOSED) == 2
    assert stats.conversion_rate(leads) == 66.7
    assert stats.average_deal_value(leads) == 400000


def test_empty_collection_is_all_zero():
    assert stats.total_revenue([]) == 0
    assert stats.conversion_rate([]) == 0
    assert stats.average_deal_value([]) == 0
    assert distribution([]) == {bucket: (0, 0) for bucket in StatusBucket}
    assert stats.recent_leads([]) == []


def test_revenue_needs_closed_status_and_offer(make_lead):
    leads = [
        make_lead("L001", LeadStatus.CLOSED),
        make_lead("L002", LeadStatus.NEGOTIATION, final_offer_price=900000),
        make_lead("L003", LeadStatus.CLOSED, final_offer_price=250000),
    ]
    assert stats.total_revenue(leads) == 250000
    # Both closed leads count towards the average even without an offer
    assert stats.average_deal_value(leads) == 125000


def test_conversion_rate_rounds_half_up(make_lead):
    leads = [make_lead("L001", LeadStatus.CLOSED)] + [make_lead(f"L1{i:02d}") for i in range(15)]
    assert stats.conversion_rate(leads) == 6.3


def test_every_status_has_a_bucket():
    assert set(stats.STATUS_BUCKETS) == set(LeadStatus)
    assert set(stats.STATUS_BUCKETS.values()) == set(StatusBucket)


def test_valuation_statuses_share_a_bucket(make_lead):
    leads = [
        make_lead("L001", LeadStatus.NEW),
        make_lead("L002", LeadStatus.VALUATION_SCHEDULED),
        make_lead("L003", LeadStatus.VALUATION_COMPLETED),
    ]
    result = distribution(leads)
    assert result[StatusBucket.NEW] == (1, 33)
    assert result[StatusBucket.VALUATION] == (2, 67)
    assert result[StatusBucket.CLOSED] == (0, 0)
    assert stats.count_by_bucket(leads, StatusBucket.VALUATION) == 2


def test_distribution_partitions_the_collection(make_lead):
    leads = [make_lead(f"L{i:03d}", status) for i, status in enumerate(LeadStatus)]
    entries = stats.status_distribution(leads)
    assert [entry.bucket for entry in entries] == list(StatusBucket)
    assert sum(entry.count for entry in entries) == len(leads)


def test_percentage_rounds_half_up(make_lead):
    leads = [make_lead("L001", LeadStatus.REJECTED)] + [make_lead(f"L1{i:02d}") for i in range(7)]
    assert distribution(leads)[StatusBucket.REJECTED] == (1, 13)


def test_recent_leads_newest_first(make_lead, now):
    leads = [make_lead(f"L{i:03d}", created_at=now - timedelta(days=i)) for i in range(8)]
    leads.reverse()
    recent = stats.recent_leads(leads)
    assert [lead.id for lead in recent] == ["L000", "L001", "L002", "L003", "L004"]
    assert [lead.id for lead in stats.recent_leads(leads, 2)] == ["L000", "L001"]


def test_recent_leads_ties_keep_collection_order(make_lead, now):
    leads = [make_lead(lead_id, created_at=now) for lead_id in ("L003", "L001", "L002")]
    assert [lead.id for lead in stats.recent_leads(leads)] == ["L003", "L001", "L002"]


def test_pipeline_summary(make_lead):
    leads = [
        make_lead("L001", LeadStatus.NEW),
        make_lead("L002", LeadStatus.CONTACTED),
        make_lead("L003", LeadStatus.VALUATION_SCHEDULED),
        make_lead("L004", LeadStatus.VALUATION_COMPLETED),
        make_lead("L005", LeadStatus.NEGOTIATION),
        make_lead("L006", LeadStatus.CLOSED),
    ]
    summary = stats.pipeline_summary(leads)
    assert (summary.total, summary.new, summary.in_progress, summary.closed) == (6, 1, 3, 1)


@pytest.fixture(name="team_leads")
def team_leads_fixture(make_lead):
    return [
        make_lead("L001", LeadStatus.NEW, executive="Amit Sharma"),
        make_lead("L002", LeadStatus.CLOSED, final_offer_price=700000, executive="Vikram Singh"),
        make_lead("L003", LeadStatus.CLOSED, final_offer_price=400000, executive="Rohan Kumar"),
        make_lead("L004", LeadStatus.CLOSED, final_offer_price=300000, executive="Vikram Singh"),
        make_lead("L005", LeadStatus.CLOSED, executive="Amit Sharma"),
        make_lead("L006", LeadStatus.NEGOTIATION, final_offer_price=999999, executive="Priya Rao"),
    ]


def test_salesperson_stats(team_leads):
    result = {p.name: (p.total, p.closed, p.revenue) for p in salesperson_stats(team_leads)}
    assert result == {
        "Amit Sharma": (2, 1, 0),
        "Vikram Singh": (2, 2, 1000000),
        "Rohan Kumar": (1, 1, 400000),
        "Priya Rao": (1, 0, 0),
    }


def test_leaderboard_ranks_by_closed_deals(team_leads):
    board = build_leaderboard(team_leads)
    assert [p.name for p in board] == ["Vikram Singh", "Amit Sharma", "Rohan Kumar"]
    assert [p.closed for p in board] == sorted((p.closed for p in board), reverse=True)
    assert all(p.closed <= p.total for p in board)


def test_leaderboard_without_limit(team_leads):
    board = build_leaderboard(team_leads, limit=None)
    assert [p.name for p in board] == ["Vikram Singh", "Amit Sharma", "Rohan Kumar", "Priya Rao"]
    assert build_leaderboard(team_leads, limit=1)[0].revenue == 1000000


def test_leaderboard_accepts_empty_names(make_lead):
    board = build_leaderboard([make_lead("L001", executive=""), make_lead("L002", executive="")])
    assert [(p.name, p.total) for p in board] == [("", 2)]


def test_dashboard_over_window(make_lead, now):
    leads = [
        make_lead("L001", LeadStatus.CLOSED, final_offer_price=500000, created_at=now - timedelta(days=1)),
        make_lead("L002", LeadStatus.REJECTED, created_at=now - timedelta(days=2)),
        make_lead("L003", LeadStatus.CLOSED, final_offer_price=300000, created_at=now - timedelta(days=60)),
    ]
    dashboard = build_dashboard(leads, LeadFilters(date_range=DateRange.LAST_7_DAYS), now=now)
    assert dashboard.window.end == now
    assert dashboard.total_leads == 2
    assert dashboard.closed_leads == 1
    assert dashboard.rejected_leads == 1
    assert dashboard.total_revenue == 500000
    assert dashboard.conversion_rate == 50.0
    assert [lead.id for lead in dashboard.recent_leads] == ["L001", "L002"]
    assert dashboard.top_performers[0].revenue == 500000


def test_dashboard_all_time(make_lead, now):
    leads = [make_lead("L001"), make_lead("L002", LeadStatus.CLOSED, final_offer_price=100000)]
    dashboard = build_dashboard(leads, now=now)
    assert dashboard.window is None
    assert dashboard.new_leads == 1
    assert dashboard.average_deal_value == 100000


def test_engine_logs_at_debug(team_leads, caplog):
    caplog.set_level(logging.DEBUG, logger="carthi.analytics")
    build_leaderboard(team_leads)
    stats.conversion_rate(team_leads)
    assert "Grouped 6 leads under 4 salespeople" in caplog.text
    assert "Conversion 4 of 6 leads" in caplog.text
