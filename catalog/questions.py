from typing import Dict, List

from models.taxonomy import (
    BigFiveCategory,
    Framework,
    MBTIAxis,
    MBTIPole,
    Question,
    RIASECCategory,
    ValueCategory,
)

_B5 = Framework.BIG_FIVE
_MB = Framework.MBTI
_RI = Framework.RIASEC
_VA = Framework.VALUES

QUESTIONS: List[Question] = [
    # Big Five (2 per trait)
    Question("b5_o1", "I enjoy trying new and different activities, even if they seem unusual.", _B5, BigFiveCategory.OPENNESS),
    Question("b5_o2", "I am curious and love exploring places or learning about how things work.", _B5, BigFiveCategory.OPENNESS),
    Question("b5_c1", "I always try to complete my schoolwork or tasks before doing something fun.", _B5, BigFiveCategory.CONSCIENTIOUSNESS),
    Question("b5_c2", "I make plans (like a schedule or list) and try to follow them.", _B5, BigFiveCategory.CONSCIENTIOUSNESS),
    Question("b5_e1", "I enjoy being around people and having lively conversations.", _B5, BigFiveCategory.EXTRAVERSION),
    Question("b5_e2", "I often feel energized when I am with a group of friends.", _B5, BigFiveCategory.EXTRAVERSION),
    Question("b5_a1", "I enjoy helping other people when they have a problem.", _B5, BigFiveCategory.AGREEABLENESS),
    Question("b5_a2", "I believe it is important to be kind and understanding to others.", _B5, BigFiveCategory.AGREEABLENESS),
    Question("b5_n1", "I often feel anxious or worried about things that might happen.", _B5, BigFiveCategory.NEUROTICISM),
    Question("b5_n2", "I get upset or irritated easily, even by small issues.", _B5, BigFiveCategory.NEUROTICISM),

    # MBTI-style (1 per pole)
    Question("mbti_ei_e", "I feel energized and enthusiastic when I am with friends or a group of people.", _MB, MBTIAxis.EXTRAVERSION_INTROVERSION, MBTIPole.EXTRAVERSION),
    Question("mbti_ei_i", "After being with people for a long time, I need some time alone to relax.", _MB, MBTIAxis.EXTRAVERSION_INTROVERSION, MBTIPole.INTROVERSION),
    Question("mbti_sn_s", "I prefer to focus on facts and details that I can observe.", _MB, MBTIAxis.SENSING_INTUITION, MBTIPole.SENSING),
    Question("mbti_sn_n", "I enjoy thinking about new ideas and imagining how things could be.", _MB, MBTIAxis.SENSING_INTUITION, MBTIPole.INTUITION),
    Question("mbti_tf_t", "I make decisions based on logic and reason rather than my feelings.", _MB, MBTIAxis.THINKING_FEELING, MBTIPole.THINKING),
    Question("mbti_tf_f", "I care more about other people's feelings when making decisions.", _MB, MBTIAxis.THINKING_FEELING, MBTIPole.FEELING),
    Question("mbti_jp_j", "I like keeping my plans and schedules organized.", _MB, MBTIAxis.JUDGING_PERCEIVING, MBTIPole.JUDGING),
    Question("mbti_jp_p", "I enjoy leaving my options open and being spontaneous.", _MB, MBTIAxis.JUDGING_PERCEIVING, MBTIPole.PERCEIVING),

    # RIASEC (2 per interest)
    Question("riasec_r1", "I enjoy building or fixing things (like models, machines, or gadgets).", _RI, RIASECCategory.REALISTIC),
    Question("riasec_r2", "I like working outdoors (for example, gardening, hiking, or sports).", _RI, RIASECCategory.REALISTIC),
    Question("riasec_i1", "I enjoy doing science experiments or learning about science.", _RI, RIASECCategory.INVESTIGATIVE),
    Question("riasec_i2", "I like solving puzzles and brainteasers.", _RI, RIASECCategory.INVESTIGATIVE),
    Question("riasec_a1", "I enjoy drawing, painting, or other art activities.", _RI, RIASECCategory.ARTISTIC),
    Question("riasec_a2", "I like playing a musical instrument or singing.", _RI, RIASECCategory.ARTISTIC),
    Question("riasec_s1", "I enjoy helping other people with their problems.", _RI, RIASECCategory.SOCIAL),
    Question("riasec_s2", "I like teaching or explaining things to friends or classmates.", _RI, RIASECCategory.SOCIAL),
    Question("riasec_e1", "I enjoy leading others and taking charge of group activities.", _RI, RIASECCategory.ENTERPRISING),
    Question("riasec_e2", "I like to persuade people to follow my ideas.", _RI, RIASECCategory.ENTERPRISING),
    Question("riasec_c1", "I like organizing things (like my room or files) in a neat way.", _RI, RIASECCategory.CONVENTIONAL),
    Question("riasec_c2", "I enjoy working with numbers and data (like math problems or charts).", _RI, RIASECCategory.CONVENTIONAL),

    # Work values (1 per value)
    Question("val_aut1", "I prefer to work independently and make my own decisions about how to do things.", _VA, ValueCategory.AUTONOMY),
    Question("val_team1", "I achieve more and enjoy work most when I am part of a collaborative team.", _VA, ValueCategory.TEAMWORK),
    Question("val_stab1", "Having a secure and predictable job is very important to me.", _VA, ValueCategory.STABILITY),
    Question("val_innov1", "I am excited by opportunities to work on new, cutting-edge projects and ideas.", _VA, ValueCategory.INNOVATION),
    Question("val_wlb1", "It is important for me to have a good balance between my work/studies and my personal life.", _VA, ValueCategory.WORK_LIFE_BALANCE),
]

QUESTIONS_BY_ID: Dict[str, Question] = {q.id: q for q in QUESTIONS}

LIKERT_MIN = 1
LIKERT_MAX = 5

LIKERT_SCALE_OPTIONS = [
    {"value": 1, "label": "Strongly Disagree"},
    {"value": 2, "label": "Disagree"},
    {"value": 3, "label": "Neutral"},
    {"value": 4, "label": "Agree"},
    {"value": 5, "label": "Strongly Agree"},
]
