"""
Pathway Catalog

Fixed careers, university programmes and schools the rules choose from.
Everything here is display data; selection logic lives in the rule modules.
"""

from typing import List, NamedTuple, Optional

from .contracts import Career, School


# =============================================================================
# CAREERS
# =============================================================================

SOFTWARE_DEVELOPER = Career(
    title="Software Developer",
    description="Design, develop, and test software applications and systems.",
    demand="High",
    requirements=["Mathematics", "Computer Science", "Problem Solving"],
    skills_needed=["Logical Thinking", "Creativity", "Attention to Detail"],
    elevator_pitch="Build the digital future with code and innovation",
)

MEDICAL_DOCTOR = Career(
    title="Medical Doctor",
    description="Diagnose and treat medical conditions, promote health and wellness.",
    demand="Very High",
    requirements=["Life Sciences", "Physical Sciences", "Mathematics"],
    skills_needed=["Empathy", "Communication", "Critical Thinking"],
    elevator_pitch="Save lives and make a difference in healthcare",
)

MARKETING_MANAGER = Career(
    title="Marketing Manager",
    description="Develop strategies to promote products and services to target audiences.",
    demand="High",
    requirements=["Business Studies", "Languages", "Economics"],
    skills_needed=["Creativity", "Communication", "Analytical Thinking"],
    elevator_pitch="Shape brand stories and connect with customers",
)

DEFAULT_CAREERS: List[Career] = [
    Career(
        title="IT Support Specialist",
        description="Provide technical assistance and support for computer systems and software.",
        demand="High",
        requirements=["Computer Studies", "Mathematics"],
        skills_needed=["Problem Solving", "Communication"],
        elevator_pitch="Help people solve technology problems every day",
    ),
    Career(
        title="Healthcare Assistant",
        description="Support medical staff in providing patient care in various healthcare settings.",
        demand="Very High",
        requirements=["Life Sciences", "Life Orientation"],
        skills_needed=["Empathy", "Teamwork", "Communication"],
        elevator_pitch="Make a difference in patients' lives every day",
    ),
]

HIGH_DEMAND_CAREERS: List[Career] = [
    Career(
        title="Data Scientist",
        description="Analyze and interpret complex data to help organizations make better decisions.",
        demand="Very High",
        requirements=["Mathematics", "Statistics", "Computer Science"],
        skills_needed=["Analytical Thinking", "Programming", "Statistics"],
        elevator_pitch="Turn data into insights that drive business decisions",
    ),
    Career(
        title="Software Engineer",
        description="Design, develop, and maintain software systems and applications.",
        demand="Very High",
        requirements=["Mathematics", "Computer Science", "Physics"],
        skills_needed=["Problem Solving", "Logic", "Creativity"],
        elevator_pitch="Create technology that changes how people live and work",
    ),
]

MEDIUM_DEMAND_CAREERS: List[Career] = [
    Career(
        title="Registered Nurse",
        description="Provide and coordinate patient care, educate patients about health conditions.",
        demand="High",
        requirements=["Life Sciences", "Physical Sciences", "Mathematics"],
        skills_needed=["Compassion", "Communication", "Critical Thinking"],
        elevator_pitch="Provide compassionate care and save lives",
    ),
    Career(
        title="Marketing Specialist",
        description="Develop and implement marketing strategies to promote products and services.",
        demand="Medium",
        requirements=["Business Studies", "Languages", "Economics"],
        skills_needed=["Creativity", "Communication", "Analytical Skills"],
        elevator_pitch="Connect brands with their ideal customers",
    ),
]

VOCATIONAL_CAREERS: List[Career] = [
    Career(
        title="Electrician",
        description="Install, maintain, and repair electrical power systems and equipment.",
        demand="High",
        requirements=["Mathematics", "Physical Sciences", "Technical Drawing"],
        skills_needed=["Problem Solving", "Technical Skills", "Safety Awareness"],
        elevator_pitch="Power communities with essential electrical services",
    ),
    Career(
        title="IT Technician",
        description="Install, maintain, and repair computer systems and networks.",
        demand="Medium",
        requirements=["Computer Studies", "Mathematics"],
        skills_needed=["Technical Skills", "Problem Solving", "Customer Service"],
        elevator_pitch="Keep technology running smoothly for businesses",
    ),
]


# =============================================================================
# UNIVERSITY PROGRAMMES
# =============================================================================

class ProgramCandidate(NamedTuple):
    """A programme offered only when the student's APS passes ``min_aps``."""
    name: str
    program: str
    location: str
    aps_requirement: int
    min_aps: int
    required_interest: Optional[str] = None


UNIVERSITY_CANDIDATES: List[ProgramCandidate] = [
    ProgramCandidate("University of Cape Town", "BSc Computer Science", "Cape Town", 42, 40),
    ProgramCandidate("University of Witwatersrand", "BCom Accounting", "Johannesburg", 38, 35),
    ProgramCandidate("University of Mpumalanga", "BEd Foundation Phase", "Mbombela", 30, 30),
    ProgramCandidate(
        "Stellenbosch University", "BEng Mechanical Engineering", "Stellenbosch", 40, 35,
        required_interest="Engineering",
    ),
]


# =============================================================================
# SCHOOLS
# =============================================================================

SCIENCE_SCHOOL = School(
    name="Mpumalanga Science Academy",
    location="Nelspruit",
    distance="5km",
    type="Public",
    streams=["Science", "Engineering", "IT"],
)

COMMERCE_SCHOOL = School(
    name="Nelspruit Commercial High",
    location="Nelspruit",
    distance="3km",
    type="Public",
    streams=["Commerce", "Business Studies", "Economics"],
)

TECHNICAL_SCHOOL = School(
    name="Tech Innovation Academy",
    location="Mbombela",
    distance="8km",
    type="Technical",
    streams=["Engineering", "IT", "Technical Drawing"],
)


# =============================================================================
# ADMISSION REQUIREMENTS
# =============================================================================

BASELINE_REQUIREMENTS: List[str] = [
    "Minimum 30% in Home Language",
    "50% in four subjects including Mathematics or Mathematical Literacy",
    "Valid South African ID",
    "Grade 12 Certificate",
    "Minimum APS score of 28 for most programs",
]

LOW_APS_ADVISORIES: List[str] = [
    "Consider foundation programs or bridging courses",
    "Improve your APS score by retaking key subjects",
]
