# Interpretation texts keyed by taxonomy category.
# Each trait entry carries a general blurb plus high/moderate/low readings.
from models.taxonomy import BigFiveCategory, MBTIAxis, MBTIPole, RIASECCategory, ValueCategory

BIG_FIVE_DESCRIPTIONS = {
    BigFiveCategory.OPENNESS: {
        "general": "Reflects imagination, curiosity, artistic sensitivity, and a preference for variety.",
        "high": "You are likely adventurous, creative, and open to new experiences and abstract ideas.",
        "moderate": "You have a balanced approach; open to new things but also appreciating routine and the familiar.",
        "low": "You tend to be practical, conventional, and prefer routines and familiar experiences over new ones.",
    },
    BigFiveCategory.CONSCIENTIOUSNESS: {
        "general": "Concerns the way we control, regulate, and direct our impulses. It includes traits like organization, dependability, and self-discipline.",
        "high": "You are typically organized, dependable, responsible, and self-disciplined. You likely prefer planned rather than spontaneous behavior.",
        "moderate": "You are reasonably reliable and organized, but can also be flexible and occasionally spontaneous.",
        "low": "You may be more spontaneous, flexible, and less concerned with precise organization and planning.",
    },
    BigFiveCategory.EXTRAVERSION: {
        "general": "Characterized by positive emotions, assertiveness, sociability, and the tendency to seek stimulation in the company of others.",
        "high": "You are likely outgoing, energetic, and sociable. You enjoy being around people and in stimulating environments.",
        "moderate": "You enjoy a mix of social interaction and solitude, adapting to different social situations.",
        "low": "You are probably more reserved, independent, and prefer quieter settings or solitude to recharge.",
    },
    BigFiveCategory.AGREEABLENESS: {
        "general": "Reflects individual differences in concern with cooperation and social harmony. Traits include being courteous, flexible, trusting, and cooperative.",
        "high": "You tend to be compassionate, cooperative, and considerate of others. You likely value getting along with people.",
        "moderate": "You are generally cooperative and kind, but can also assert your own views when necessary.",
        "low": "You may be more analytical, detached, and potentially competitive, prioritizing your own interests or principles.",
    },
    BigFiveCategory.NEUROTICISM: {
        "general": "Reflects the tendency to experience negative emotions, such as anger, anxiety, or depression. Also known as Emotional Stability (low Neuroticism).",
        "high": "You might experience mood swings, anxiety, or irritability more frequently. You may be more sensitive to stress.",
        "moderate": "You experience a normal range of emotions and can generally cope with stress effectively.",
        "low": "You are likely calm, emotionally stable, and resilient, not easily upset or stressed.",
    },
}

MBTI_DESCRIPTIONS = {
    MBTIAxis.EXTRAVERSION_INTROVERSION: {
        "dimension": "Focus of Energy: How you direct and receive energy.",
        MBTIPole.EXTRAVERSION: ("Extraversion (E)", "You likely focus on the outer world of people and things. You are energized by interacting with others and taking action."),
        MBTIPole.INTROVERSION: ("Introversion (I)", "You likely focus on your inner world of ideas and experiences. You are energized by spending time alone or in quiet reflection."),
    },
    MBTIAxis.SENSING_INTUITION: {
        "dimension": "Information Gathering: How you prefer to take in information.",
        MBTIPole.SENSING: ("Sensing (S)", "You tend to focus on the present and concrete information gathered through your senses. You prefer dealing with facts and details."),
        MBTIPole.INTUITION: ("Intuition (N)", "You tend to focus on patterns, possibilities, and the future. You prefer dealing with abstract concepts and new ideas."),
    },
    MBTIAxis.THINKING_FEELING: {
        "dimension": "Decision Making: How you prefer to make decisions.",
        MBTIPole.THINKING: ("Thinking (T)", "You tend to make decisions based on logic and objective analysis. You value fairness and consistency."),
        MBTIPole.FEELING: ("Feeling (F)", "You tend to weigh how choices affect the people involved. You value harmony and empathy."),
    },
    MBTIAxis.JUDGING_PERCEIVING: {
        "dimension": "Lifestyle Preference: How you prefer to live your outer life.",
        MBTIPole.JUDGING: ("Judging (J)", "You prefer a planned, organized approach to life. You like to have things decided and enjoy structure."),
        MBTIPole.PERCEIVING: ("Perceiving (P)", "You prefer a flexible, spontaneous approach to life. You like to keep your options open and enjoy adapting to new situations."),
    },
}

RIASEC_DESCRIPTIONS = {
    RIASECCategory.REALISTIC: {
        "general": "Prefers practical, hands-on activities and working with tools, machines, or animals. Values material rewards for tangible accomplishments.",
        "high": "You likely enjoy practical tasks, working with your hands, and seeing tangible results. Careers in skilled trades, technology, or outdoors might appeal.",
        "moderate": "You are comfortable with some practical tasks but may also enjoy other types of activities.",
        "low": "You may prefer working with ideas, people, or data rather than hands-on, physical tasks.",
    },
    RIASECCategory.INVESTIGATIVE: {
        "general": "Prefers activities involving thinking, organizing, and understanding. Enjoys solving complex problems and analytical tasks.",
        "high": "You are likely analytical, curious, and enjoy problem-solving. Careers in science, research, or academia could be a good fit.",
        "moderate": "You have some interest in analytical tasks and research but may balance it with other preferences.",
        "low": "You might prefer action-oriented tasks or working with people over deep, analytical thinking.",
    },
    RIASECCategory.ARTISTIC: {
        "general": "Prefers activities that are creative, original, and unsystematic, allowing for self-expression. Values aesthetics and originality.",
        "high": "You are likely imaginative, expressive, and enjoy creative activities. Careers in arts, design, writing, or performance may suit you.",
        "moderate": "You appreciate creativity and may have artistic hobbies, but it might not be your primary focus.",
        "low": "You may prefer more structured, practical, or analytical tasks over unstructured creative pursuits.",
    },
    RIASECCategory.SOCIAL: {
        "general": "Prefers activities that involve helping, teaching, or providing service to others. Values social interaction and making a difference.",
        "high": "You likely enjoy helping, teaching, and interacting with others. Careers in counseling, education, healthcare, or social work could be fulfilling.",
        "moderate": "You are generally helpful and enjoy people, but may also value other aspects in your work.",
        "low": "You might prefer working with data, things, or ideas rather than focusing primarily on helping others directly.",
    },
    RIASECCategory.ENTERPRISING: {
        "general": "Prefers activities that involve persuading, leading, or managing others for organizational goals or economic gain. Values ambition and influence.",
        "high": "You are likely persuasive, ambitious, and enjoy leading or influencing others. Careers in business, sales, management, or politics might be a match.",
        "moderate": "You are comfortable taking initiative and leading at times, but may not always seek out such roles.",
        "low": "You may prefer supporting roles or working independently rather than leading or persuading others.",
    },
    RIASECCategory.CONVENTIONAL: {
        "general": "Prefers activities that involve organizing data, following procedures, and working with details. Values order and precision.",
        "high": "You likely enjoy organized, systematic work and paying attention to detail. Careers in finance, administration, or data management could suit you.",
        "moderate": "You appreciate order and can handle detailed work, but may also enjoy some flexibility.",
        "low": "You might prefer less structured tasks and a bigger-picture focus over detailed, routine work.",
    },
}

VALUE_DESCRIPTIONS = {
    ValueCategory.AUTONOMY: {
        "general": "Relates to the preference for independence, self-direction, and control over one's work.",
        "high": "You highly value freedom in your work, preferring to make your own decisions and manage your own tasks.",
        "moderate": "You appreciate having some independence in your work, but are also comfortable with guidance and structure.",
        "low": "You may prefer clearer direction and established procedures, and feel more comfortable when tasks are well-defined by others.",
    },
    ValueCategory.TEAMWORK: {
        "general": "Indicates the preference for collaborative environments and working effectively with others.",
        "high": "You thrive in team settings, enjoy collaboration, and believe collective effort leads to better outcomes.",
        "moderate": "You are a good team player when needed, but can also work effectively on your own.",
        "low": "You may prefer working alone or in settings where individual contributions are more emphasized than group efforts.",
    },
    ValueCategory.STABILITY: {
        "general": "Reflects the importance of security, predictability, and long-term prospects in a job or career.",
        "high": "You place a high importance on job security, clear paths for advancement, and a stable work environment.",
        "moderate": "You value stability but are also open to some level of change or risk if the opportunity is right.",
        "low": "You may be more comfortable with change, risk-taking, and less predictable work environments, perhaps prioritizing excitement or rapid growth.",
    },
    ValueCategory.INNOVATION: {
        "general": "Concerns the preference for working on new ideas, creative projects, and forward-thinking tasks.",
        "high": "You are energized by new challenges, creative problem-solving, and opportunities to pioneer new approaches.",
        "moderate": "You enjoy new ideas and can be innovative, but also appreciate refining existing methods.",
        "low": "You may prefer working with established processes and proven methods rather than constantly seeking novelty or untested ideas.",
    },
    ValueCategory.WORK_LIFE_BALANCE: {
        "general": "Highlights the importance of maintaining a healthy equilibrium between professional and personal life.",
        "high": "You strongly prioritize a clear separation and balance between your work/studies and personal time, valuing flexibility and personal well-being.",
        "moderate": "You aim for a good work-life balance, understanding that demands may fluctuate but a healthy boundary is important.",
        "low": "You may be highly career-focused and willing to dedicate significant time to work, potentially seeing less distinction between professional and personal life.",
    },
}
