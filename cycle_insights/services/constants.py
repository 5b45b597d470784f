"""
Constants and shared data for cycle-related services.
"""
from cycle_insights.models.phase import CyclePhase

# Used whenever no positive average cycle length is known
DEFAULT_CYCLE_LENGTH = 28

# Days of bleeding assumed at the start of every cycle
MENSTRUAL_DAYS = 5

# Ovulation is placed this many days before the next expected period
LUTEAL_PHASE_LENGTH = 14

# Follicular phase ends this many days before ovulation
FOLLICULAR_OVULATION_GAP = 3

# Ovulation phase lasts through this many days after ovulation
OVULATION_PHASE_TAIL = 2

# Fertile window opens this many days before ovulation
FERTILE_WINDOW_LEAD_DAYS = 5

# Fixed estimate shown until daily flow data drives period length
DEFAULT_PERIOD_LENGTH = 5

PHASE_DETAILS = {
    CyclePhase.MENSTRUAL: {
        "title": "Menstrual Phase",
        "description": "Your body is shedding the uterine lining. Rest and gentle movement are key."
    },
    CyclePhase.FOLLICULAR: {
        "title": "Follicular Phase",
        "description": "Energy rises as your body prepares for ovulation. A great time for new beginnings."
    },
    CyclePhase.OVULATION: {
        "title": "Ovulation Phase",
        "description": "Peak fertility. You might feel more social and energetic."
    },
    CyclePhase.LUTEAL: {
        "title": "Luteal Phase",
        "description": "Energy may decrease as your body prepares for your period. Focus on self-care."
    },
    CyclePhase.UNKNOWN: {
        "title": "Unknown Phase",
        "description": "Log the start of your period to see where you are in your cycle."
    }
}
