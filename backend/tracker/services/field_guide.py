from dataclasses import dataclass

from tracker.models.person import Role


@dataclass(frozen=True)
class FieldGuide:
    description: str
    include: str
    why: str
    exclude: str
    important: str


def _g(description: str, include: str, why: str, exclude: str, important: str) -> FieldGuide:
    return FieldGuide(description, include, why, exclude, important)


# Help text shown next to each EOD input, keyed by role then field name.
FIELD_GUIDES: dict[Role, dict[str, FieldGuide]] = {
    Role.dialer: {
        "dials": _g(
            "Enter the total number of dials made today.",
            "All outbound call attempts.",
            "Tracks daily activity volume.",
            "Inbound calls or follow-ups.",
            "Base metric for dialer performance.",
        ),
        "connects": _g(
            "Enter the total number of successful connections.",
            "Calls where someone answered.",
            "Measures contact rate.",
            "Voicemails or no-answers.",
            "Must not exceed Dials.",
        ),
        "conversations": _g(
            "Enter the total number of actual conversations held.",
            "Calls with meaningful dialogue.",
            "Tracks engagement success.",
            "Brief connects without conversation.",
            "Must not exceed Connects.",
        ),
        "qualified_conversations": _g(
            "Enter the total number of qualified conversations.",
            "Conversations meeting qualification criteria.",
            "Tracks lead quality.",
            "Unqualified or irrelevant talks.",
            "Must not exceed Conversations.",
        ),
        "meetings_scheduled": _g(
            "Enter the total number of meetings scheduled today.",
            "All meetings booked for any date.",
            "Tracks pipeline generation.",
            "Meetings not confirmed.",
            "Reflects conversion from conversations.",
        ),
        "meetings_set": _g(
            "Enter the total number of meetings confirmed for today.",
            "Meetings scheduled and set for today.",
            "Tracks today's booked opportunities.",
            "Future or unconfirmed meetings.",
            "Must equal Meetings Showed + No Shows.",
        ),
        "meetings_showed": _g(
            "Enter the total number of meetings that occurred.",
            "Meetings where prospects attended.",
            "Measures attendance rate.",
            "No-shows or cancellations.",
            "Must not exceed Meetings Set.",
        ),
        "no_shows": _g(
            "Enter the total number of meetings where prospects didn't show.",
            "Scheduled meetings with no attendance.",
            "Tracks missed opportunities.",
            "Attended or cancelled meetings.",
            "Complements Meetings Showed.",
        ),
        "closed_deals": _g(
            "Enter the total number of deals closed today.",
            "Finalized sales from meetings.",
            "Tracks sales success.",
            "Pending or negotiated deals.",
            "Must not exceed Meetings Showed.",
        ),
        "revenue_generated": _g(
            "Enter the total revenue from closed deals.",
            "Full sale value (including deferred revenue).",
            "Tracks overall deal value.",
            "Non-finalized deals.",
            "Must be greater than 0 when Closed Deals > 0.",
        ),
        "cash_collected": _g(
            "Enter the total cash collected from closed deals.",
            "Upfront payments received today.",
            "Tracks immediate financial impact.",
            "Deferred payments.",
            "If > 0, Closed Deals > 0.",
        ),
    },
    Role.setter: {
        "daily_outbound_conversations": _g(
            "Enter the total number of new conversations you initiated today.",
            "All calls, messages, or emails sent to prospects.",
            "Tracks your outbound activity and prospecting efforts.",
            "Follow-ups or conversations where the lead contacted you first.",
            "Ensure you record only unique outbound efforts.",
        ),
        "inbound_conversations": _g(
            "Enter the total number of new conversations initiated by leads today.",
            "All inbound messages where a lead reached out to you.",
            "Measures the volume and effectiveness of inbound lead flow.",
            "Follow-ups or ongoing conversations with existing leads.",
            "Count only leads that initiated contact today.",
        ),
        "follow_ups": _g(
            "Enter the total number of follow-up conversations conducted today.",
            "All interactions with leads you've contacted before.",
            "Tracks how well you are nurturing your pipeline.",
            "New conversations or outreach to inactive leads.",
            "Cross-check with your CRM or activity logs to avoid double-counting.",
        ),
        "calls_proposed": _g(
            "Enter the total number of calls you proposed to leads today.",
            "All call suggestions explicitly offered, regardless of whether they were accepted.",
            "Provides context for booking efficiency and overall lead engagement.",
            "Calls discussed but not formally proposed.",
            "Ensure consistency with booked calls and total conversations.",
        ),
        "total_high_ticket_sales_calls_booked": _g(
            "Enter the total number of high-ticket sales calls successfully booked today.",
            "All confirmed calls scheduled for high-ticket offers.",
            "Tracks your core activity of setting sales calls.",
            "Low-ticket calls or unconfirmed proposals.",
            "Verify against calendar or CRM bookings.",
        ),
        "sets_scheduled": _g(
            "Enter the total number of sets scheduled for today.",
            "All confirmed appointments set to occur today, regardless of when they were booked.",
            "Tracks how many leads are scheduled to attend calls today.",
            "Declined or pending call proposals.",
            "Double-check against proposed calls to ensure accuracy.",
        ),
        "sets_taken": _g(
            "Enter the total number of scheduled sets that occurred today.",
            "All sets where the lead attended the appointment.",
            "Tracks lead engagement and show-up rates.",
            "No-shows or rescheduled sets.",
            "Ensure accuracy by cross-referencing with attendance logs.",
        ),
        "closed_sets": _g(
            "Enter the total number of sets that resulted in closed deals today.",
            "All appointments that led to a successful sale.",
            "Tracks your conversion rate and revenue contributions.",
            "Pending deals or follow-ups.",
            "Verify this number against actual deal closures.",
        ),
        "revenue_generated": _g(
            "Enter the total revenue generated from closed deals today.",
            "Combined revenue from all high-ticket sales and other offers.",
            "Tracks financial outcomes and contribution to company growth.",
            "Deals that are still pending or in follow-up stages.",
            "Must cover the breakdown of collected cash and downsell revenue.",
        ),
        "new_cash_collected": _g(
            "Enter the total upfront cash collected from closed deals today.",
            "Initial payments made at the time of sale.",
            "Reflects immediate cash flow contributions.",
            "Recurring payments or revenue not yet collected.",
            "Must not exceed Revenue Generated.",
        ),
        "recurring_cash_collected": _g(
            "Enter the total recurring payments collected from closed deals today.",
            "Subscription or installment payments received.",
            "Tracks ongoing revenue streams.",
            "Initial payments or revenue not collected today.",
            "Must not exceed Revenue Generated.",
        ),
        "downsell_revenue": _g(
            "Enter the total revenue generated from downsell offers today.",
            "Revenue from lower-ticket offers made to leads.",
            "Captures additional contributions to total revenue.",
            "High-ticket sales or pending deals.",
            "Must not exceed Revenue Generated.",
        ),
    },
    Role.closer: {
        "daily_calls_booked": _g(
            "Enter the total number of calls scheduled on your calendar today.",
            "All calls booked by SDRs, prospects, or others.",
            "Tracks all scheduled opportunities.",
            "Calls that were never added to your calendar.",
            "Must equal the sum of Showed, No Showed, Cancelled, Disqualified, and Rescheduled.",
        ),
        "calls_taken": _g(
            "Enter the total number of calls attended today.",
            "All calls handled by you today.",
            "Tracks your daily activity.",
            "Calls not attended or rescheduled.",
            "Must not exceed Calls Booked.",
        ),
        "shows": _g(
            "Enter the total number of booked calls that showed up today.",
            "All calls where the prospect attended.",
            "Measures attendance rates.",
            "Calls that were rescheduled, cancelled, or marked as no-show.",
            "Must not exceed Calls Booked - (Cancelled + Disqualified + Rescheduled).",
        ),
        "no_shows": _g(
            "Enter the total number of calls where the prospect did not show up.",
            "Scheduled calls with no attendance today.",
            "Tracks missed opportunities.",
            "Attended, cancelled, or rescheduled calls.",
            "Must complement Shows to calculate rates.",
        ),
        "cancelled": _g(
            "Enter the total number of calls cancelled by prospects.",
            "Calls officially cancelled and removed from the schedule.",
            "Tracks lost opportunities.",
            "Calls rescheduled or no-showed.",
            "Contributes to total Calls Booked distribution.",
        ),
        "disqualified": _g(
            "Enter the total number of disqualified calls.",
            "Calls where prospects didn't meet qualification criteria.",
            "Tracks lead quality.",
            "Qualified calls, even if they didn't close.",
            "Contributes to total Calls Booked distribution.",
        ),
        "rescheduled": _g(
            "Enter the total number of calls rescheduled today.",
            "Calls officially moved to a different date.",
            "Tracks leads that remain in the pipeline.",
            "Calls cancelled or attended today.",
            "Reflects pipeline management.",
        ),
        "offers_made": _g(
            "Enter the total number of offers presented during calls.",
            "Only offers made during today's calls.",
            "Tracks sales activity.",
            "Offers made outside of today's reported calls.",
            "Must not exceed Calls Taken.",
        ),
        "closes": _g(
            "Enter the total number of calls that resulted in a closed sale.",
            "All successful calls where deals were finalized.",
            "Tracks sales success.",
            "Leads still in negotiation or pending.",
            "Must not exceed Calls Taken nor Offers Made.",
        ),
        "cash_collected": _g(
            "Enter the total amount of cash collected from closed deals.",
            "All upfront payments received today.",
            "Tracks immediate financial impact.",
            "Deferred or pending payments.",
            "Reflects efficiency in cash flow.",
        ),
        "revenue_generated": _g(
            "Enter the total revenue generated from closed deals.",
            "Full sale value (including deferred revenue).",
            "Tracks overall deal value.",
            "Non-finalized deals or leads still in negotiation.",
            "Reflects overall sales performance.",
        ),
    },
}


def guide_for(role: Role, field_name: str) -> FieldGuide | None:
    return FIELD_GUIDES.get(Role(role), {}).get(field_name)
