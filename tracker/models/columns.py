"""Header labels used to locate fields in each sheet.

Columns are always resolved by exact header text, never by position. If a
form question or a sheet header is reworded, the matching constant here must
be updated too.
"""

# Application Results sheet
SCORE = "Score"
STATUS = "Status"
ORG_NAME = "Org Name"
COHORT = "Cohort"
LOCATION = "Location"
BUDGET = "Budget"
FULL_TIME = "Full-time Employees"
PART_TIME = "Part-time Employees"
VOLUNTEERS = "Volunteers"
PARTNER = "Partner"
BURSARY = "Bursary Needed"
COMMUNITY_FOUNDATION = "Community Foundation"
BANKING = "Banking"
PARTICIPANT_ROLES = [
    "Participant 1 Role",
    "Participant 2 Role",
    "Participant 3 Role",
    "Participant 4 Role",
]
WEBSITE = "Website"
MISSION = "Mission"
TIME_COMMITMENT = "Time commitment"
APP_FORM = "App Form"

PARTNER_SCORE = "Partner Score"
BUDGET_SCORE = "Budget Score"
FULL_TIME_SCORE = "Full Time Employee Score"
PART_TIME_SCORE = "Part Time Employee Score"
VOLUNTEER_SCORE = "Volunteer Score"
TEAM_SCORE = "Team Score"
TIME_COMMITMENT_SCORE = "Time Commitment Score"
FORM_COMPLETION_SCORE = "App Completion Score"

# ScoreBreakdown field -> results column, in sheet order
SUB_SCORE_COLUMNS = {
    "partner": PARTNER_SCORE,
    "budget": BUDGET_SCORE,
    "full_time": FULL_TIME_SCORE,
    "part_time": PART_TIME_SCORE,
    "volunteer": VOLUNTEER_SCORE,
    "team": TEAM_SCORE,
    "time_commitment": TIME_COMMITMENT_SCORE,
    "form_completion": FORM_COMPLETION_SCORE,
}

RESULTS_HEADERS = [
    SCORE,
    STATUS,
    ORG_NAME,
    COHORT,
    LOCATION,
    BUDGET,
    FULL_TIME,
    PART_TIME,
    VOLUNTEERS,
    PARTNER,
    BURSARY,
    COMMUNITY_FOUNDATION,
    BANKING,
    *PARTICIPANT_ROLES,
    WEBSITE,
    MISSION,
    TIME_COMMITMENT,
    APP_FORM,
    *SUB_SCORE_COLUMNS.values(),
]

# Raw Application Data sheet (application form export)
RAW_PROCESSED = "Processed in Results Sheet"
RAW_COHORT = "Please select the cohort you are applying for: "
RAW_ORG_NAME = "What is your organization's name?"
RAW_LOCATION = "Province/State"
RAW_BUDGET = "What is your organization's current annual budget?"
RAW_FULL_TIME = "How many full-time staff does your organization employ?"
RAW_PART_TIME = "How many part-time/contract staff does your organization employ?"
RAW_VOLUNTEERS = (
    "How many people regularly volunteer for your organization? "
    "This does not include Board members."
)
RAW_BURSARY = "Bursary Needed"
RAW_COMMUNITY_FOUNDATION = "Who is your regional Community Foundation?"
RAW_BANKING = "Whom do you bank with?"
RAW_PARTICIPANT_ROLES = [
    "What is your role in your organization?",
    "Position (1)",
    "Position (2)",
    "Position (3)",
]
RAW_WEBSITE = "Organization Website"
RAW_MISSION = "What is your organization's mission statement?"
RAW_TIME_COMMITMENT = (
    "Time commitment: Is your team able to set aside two days per month, "
    "over five months, for online pre-work, virtual sessions, and "
    "organization-specific coaching?"
)

# raw question -> results column
RAW_TO_RESULTS = {
    RAW_ORG_NAME: ORG_NAME,
    RAW_COHORT: COHORT,
    RAW_LOCATION: LOCATION,
    RAW_BUDGET: BUDGET,
    RAW_FULL_TIME: FULL_TIME,
    RAW_PART_TIME: PART_TIME,
    RAW_VOLUNTEERS: VOLUNTEERS,
    RAW_BURSARY: BURSARY,
    RAW_COMMUNITY_FOUNDATION: COMMUNITY_FOUNDATION,
    RAW_BANKING: BANKING,
    **dict(zip(RAW_PARTICIPANT_ROLES, PARTICIPANT_ROLES)),
    RAW_WEBSITE: WEBSITE,
    RAW_MISSION: MISSION,
    RAW_TIME_COMMITMENT: TIME_COMMITMENT,
}

RAW_HEADERS = [RAW_PROCESSED, *RAW_TO_RESULTS]

# SurveyMonkey response sheet
SURVEY_ORG_NAME = "What is your organization's name?"
SURVEY_NAME_ROLE = "What is your name and position?"
SURVEY_EMAIL = "What is your email address?"
SURVEY_REGIONS = "What region(s) and/or province(s) do you serve?"
SURVEY_BUDGET = "What is your current organizational budget?"
SURVEY_BANK = (
    "Whom do you bank with? This is not a mandatory question, although it does "
    "help us identify different partnerships and bursary opportunities to "
    "support organizations."
)

# Master Tracker ledger (Alumni Organizations)
LEDGER_ORG_NAME = "Org Name"
LEDGER_COHORT = "Cohort Name"
LEDGER_DATE = "Date"
LEDGER_NAME = "Name"
LEDGER_ROLE = "Roll"
LEDGER_EMAIL = "Email"
LEDGER_LOCATION = "Location"
LEDGER_BUDGET = "Operating Budget"
LEDGER_BANK = "Banking info"

# survey question -> ledger column, for fields copied verbatim
SURVEY_TO_LEDGER = {
    SURVEY_ORG_NAME: LEDGER_ORG_NAME,
    SURVEY_EMAIL: LEDGER_EMAIL,
    SURVEY_REGIONS: LEDGER_LOCATION,
    SURVEY_BUDGET: LEDGER_BUDGET,
    SURVEY_BANK: LEDGER_BANK,
}

LEDGER_TITLE = "Master Tracker"
LEDGER_HEADERS = [
    LEDGER_ORG_NAME,
    LEDGER_COHORT,
    LEDGER_DATE,
    LEDGER_NAME,
    LEDGER_ROLE,
    LEDGER_EMAIL,
    LEDGER_LOCATION,
    LEDGER_BUDGET,
    LEDGER_BANK,
    "Notes",
]
