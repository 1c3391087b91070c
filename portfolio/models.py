"""
Portfolio content models: ordered collections plus single-row page sections.
"""
import uuid

from django.db import models
from django.utils import timezone

from portfolio_backend.singletons import SingletonModel


LEVEL_CHOICES = [
    ('beginner', 'Beginner'),
    ('intermediate', 'Intermediate'),
    ('advanced', 'Advanced'),
    ('expert', 'Expert'),
]


class OrderedContent(models.Model):
    """
    Base for admin-managed collections.
    `order` is an advisory sort key; duplicates are allowed.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ['order', '-created_at']


class Project(OrderedContent):
    title = models.CharField(max_length=200)
    description = models.TextField(max_length=1000)
    image = models.CharField(max_length=500, blank=True, null=True)
    technologies = models.JSONField(default=list)
    github_url = models.URLField(max_length=500, blank=True, null=True)
    live_url = models.URLField(max_length=500, blank=True, null=True)
    featured = models.BooleanField(default=False)

    class Meta(OrderedContent.Meta):
        db_table = 'projects'

    def __str__(self):
        return self.title


class Experience(OrderedContent):
    TYPE_CHOICES = [
        ('work', 'Work'),
        ('education', 'Education'),
    ]

    title = models.CharField(max_length=200)
    company = models.CharField(max_length=200)
    location = models.CharField(max_length=100)
    start_date = models.CharField(max_length=7, help_text='YYYY-MM')
    end_date = models.CharField(max_length=7, blank=True, null=True, help_text='YYYY-MM, empty while ongoing')
    description = models.JSONField(default=list)
    technologies = models.JSONField(default=list)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default='work')
    featured = models.BooleanField(default=False)

    class Meta(OrderedContent.Meta):
        db_table = 'experiences'

    def __str__(self):
        return f"{self.title} @ {self.company}"


class Skill(OrderedContent):
    CATEGORY_CHOICES = [
        ('language', 'Language'),
        ('framework', 'Framework'),
        ('tool', 'Tool'),
        ('other', 'Other'),
    ]
    TYPE_CHOICES = [
        ('main', 'Main'),
        ('workflow', 'Workflow'),
        ('soft', 'Soft'),
    ]

    name = models.CharField(max_length=100)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    level = models.CharField(max_length=20, choices=LEVEL_CHOICES)
    icon = models.CharField(max_length=10)
    description = models.TextField(max_length=500, blank=True, null=True)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default='main')

    class Meta(OrderedContent.Meta):
        db_table = 'skills'

    def __str__(self):
        return self.name


class Tool(OrderedContent):
    name = models.CharField(max_length=100)
    category = models.CharField(max_length=50)
    level = models.CharField(max_length=20, choices=LEVEL_CHOICES)
    icon = models.CharField(max_length=10)
    description = models.TextField(max_length=500, blank=True, null=True)

    class Meta(OrderedContent.Meta):
        db_table = 'tools'

    def __str__(self):
        return self.name


class SoftSkill(OrderedContent):
    name = models.CharField(max_length=100)
    category = models.CharField(max_length=50)
    level = models.CharField(max_length=20, choices=LEVEL_CHOICES)
    icon = models.CharField(max_length=10)
    description = models.TextField(max_length=500, blank=True, null=True)

    class Meta(OrderedContent.Meta):
        db_table = 'soft_skills'

    def __str__(self):
        return self.name


# Singleton page sections

def default_copyright_text():
    return f"© {timezone.now().year} All rights reserved."


def default_quick_links():
    return [
        {'name': 'About', 'href': '#about'},
        {'name': 'Projects', 'href': '#projects'},
        {'name': 'Experience', 'href': '#experience'},
        {'name': 'Contact', 'href': '#contact'},
    ]


def default_menu_items():
    return [
        {'name': 'About', 'href': '#about', 'external': False, 'order': 1},
        {'name': 'Skills', 'href': '#skills', 'external': False, 'order': 2},
        {'name': 'Projects', 'href': '#projects', 'external': False, 'order': 3},
        {'name': 'Experience', 'href': '#experience', 'external': False, 'order': 4},
        {'name': 'Contact', 'href': '#contact', 'external': False, 'order': 5},
    ]


def default_keywords():
    return ['portfolio', 'developer', 'web development']


class HeroContent(SingletonModel):
    greeting = models.CharField(max_length=100, default="Hi, I'm")
    name = models.CharField(max_length=100, default='Your Name')
    title = models.CharField(max_length=200, default='Full-Stack Developer')
    description = models.TextField(
        max_length=1000,
        default='I build fast, accessible web applications from database to user interface.',
    )
    location = models.CharField(max_length=100, default='Remote')
    email = models.EmailField(max_length=254, default='hello@example.com')
    profile_image = models.CharField(max_length=500, blank=True, null=True)
    cta_button_1 = models.CharField(max_length=50, default='View my work')
    cta_button_2 = models.CharField(max_length=50, default='Get in touch')
    scroll_text = models.CharField(max_length=50, default='Scroll down')

    class Meta:
        db_table = 'hero_content'
        verbose_name = 'hero section'

    def __str__(self):
        return 'Hero section'


class AboutContent(SingletonModel):
    section_title = models.CharField(max_length=100, default='About me')
    section_subtitle = models.CharField(max_length=200, default='A short introduction')
    journey_title = models.CharField(max_length=100, default='My journey')
    journey_text_1 = models.TextField(
        max_length=2000,
        default='I started programming out of curiosity and turned it into a career.',
    )
    journey_text_2 = models.TextField(
        max_length=2000,
        default='Today I focus on building reliable products with modern tooling.',
    )
    skills_title = models.CharField(max_length=100, default='Skills & technologies')

    class Meta:
        db_table = 'about_content'
        verbose_name = 'about section'

    def __str__(self):
        return 'About section'


class FooterContent(SingletonModel):
    name = models.CharField(max_length=100, default='Your Name')
    description = models.TextField(max_length=500, default='Developer portfolio.')
    email = models.EmailField(max_length=254, default='hello@example.com')
    github_url = models.URLField(max_length=500, blank=True, null=True)
    linkedin_url = models.URLField(max_length=500, blank=True, null=True)
    copyright_text = models.CharField(max_length=200, default=default_copyright_text)
    quick_links = models.JSONField(default=default_quick_links)

    class Meta:
        db_table = 'footer_content'
        verbose_name = 'footer'

    def __str__(self):
        return 'Footer'


class NavigationSettings(SingletonModel):
    brand_name = models.CharField(max_length=100, default='Portfolio')
    logo = models.CharField(max_length=500, blank=True, null=True)
    show_logo = models.BooleanField(default=False)
    menu_items = models.JSONField(default=default_menu_items)
    cta_button = models.CharField(max_length=50, blank=True, null=True, default='Contact me')
    cta_button_link = models.CharField(max_length=500, blank=True, null=True, default='#contact')
    cta_button_enabled = models.BooleanField(default=True)
    mobile_menu_enabled = models.BooleanField(default=True)
    theme_toggle = models.BooleanField(default=True)

    class Meta:
        db_table = 'navigation_settings'
        verbose_name_plural = 'navigation settings'

    def __str__(self):
        return 'Navigation settings'


class SeoSettings(SingletonModel):
    title = models.CharField(max_length=100, default='Portfolio')
    description = models.CharField(max_length=300, default='Personal portfolio: projects, experience and contact.')
    keywords = models.JSONField(default=default_keywords)
    og_title = models.CharField(max_length=100, blank=True, null=True)
    og_description = models.CharField(max_length=300, blank=True, null=True)
    og_image = models.CharField(max_length=500, blank=True, null=True)
    google_analytics_id = models.CharField(max_length=50, blank=True, null=True)
    structured_data = models.TextField(blank=True, null=True, help_text='JSON-LD document')
    robots_meta = models.CharField(max_length=100, default='index,follow')
    canonical_url = models.URLField(max_length=500, blank=True, null=True)

    class Meta:
        db_table = 'seo_settings'
        verbose_name_plural = 'SEO settings'

    def __str__(self):
        return 'SEO settings'
