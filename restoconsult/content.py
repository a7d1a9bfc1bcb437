"""Static copy for the marketing pages."""

from restoconsult.models import ServiceInterest

NAV_ITEMS = [
    {'name': 'Services', 'href': '#services'},
    {'name': 'About', 'href': '#about'},
    {'name': 'Process', 'href': '#process'},
    {'name': 'Contact', 'href': '#contact'},
]

HERO = {
    'title': 'Transform Your Restaurant Into a Thriving Business',
    'subtitle': ('Expert consulting for concept, menu, operations and people. '
                 'We help restaurants grow revenue and cut waste.'),
    'cta': 'Get Your Free Consultation',
}

SERVICES = [
    {
        'key': ServiceInterest.CONCEPT_DEVELOPMENT,
        'description': ('Transform your vision into a compelling restaurant concept that stands out '
                        'in the market and resonates with your target audience.'),
    },
    {
        'key': ServiceInterest.MENU_ENGINEERING,
        'description': ('Optimize your menu for profitability and guest satisfaction with '
                        'data-driven insights and culinary expertise.'),
    },
    {
        'key': ServiceInterest.OPERATIONAL_EFFICIENCY,
        'description': ('Streamline operations to reduce costs, improve service speed, and enhance '
                        'the overall dining experience.'),
    },
    {
        'key': ServiceInterest.STAFF_TRAINING,
        'description': ('Build a skilled, motivated team that delivers exceptional service and '
                        'drives customer loyalty.'),
    },
    {
        'key': ServiceInterest.MARKETING_COST_CONTROL,
        'description': ('Develop effective marketing strategies while maintaining tight control '
                        'over operational costs.'),
    },
    {
        'key': ServiceInterest.RECRUITING,
        'description': ("Find and hire the right talent to build a strong team that supports your "
                        "restaurant's success."),
    },
]

PROCESS_STEPS = [
    {
        'title': 'Discover',
        'description': ('We analyze your current operations, market position, and growth '
                        'opportunities through comprehensive audits and stakeholder interviews.'),
    },
    {
        'title': 'Prototype',
        'description': ('We design tailored solutions and test concepts with rapid prototyping to '
                        'ensure maximum impact and feasibility.'),
    },
    {
        'title': 'Scale',
        'description': ('We implement proven strategies with ongoing support to ensure sustainable '
                        'growth and long-term success.'),
    },
]

STATS = [
    {'value': '200+', 'label': 'Projects Completed'},
    {'value': '98%', 'label': 'Client Satisfaction'},
    {'value': '40%', 'label': 'Avg Revenue Increase'},
    {'value': '24/7', 'label': 'Support Available'},
]

WHY_US = [
    '15+ years of industry experience',
    'Proven track record of 40% revenue growth',
    'End-to-end restaurant solutions',
    '24/7 ongoing support',
]

OFFICE = 'Westlands, Nairobi, Kenya'
