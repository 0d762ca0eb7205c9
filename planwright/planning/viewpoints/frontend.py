# planwright/planning/viewpoints/frontend.py
"""Frontend viewpoint: UX, design systems, components, accessibility and performance."""

import re

from planwright.config.schema import SynthesisConfig
from planwright.planning.schemas.requirements import Requirements
from planwright.planning.schemas.workflow import Phase
from planwright.planning.viewpoints.base import (
    Viewpoint,
    feature_implementation_phases,
    task,
)

UI_COMPONENTS = (
    "button", "form", "input", "modal", "dialog", "dropdown", "menu",
    "navigation", "header", "footer", "sidebar", "card", "table",
    "list", "grid", "chart", "calendar", "datepicker", "search",
    "filter", "pagination", "tabs", "accordion", "tooltip", "alert",
    "notification", "progress", "loader", "avatar", "badge", "tag",
)
_UI_COMPONENT_PATTERNS = tuple(
    (name, re.compile(rf"\b{name}s?\b", re.IGNORECASE)) for name in UI_COMPONENTS
)

COMPLEX_COMPONENTS = frozenset({"table", "chart", "calendar", "form", "navigation"})
SIMPLE_COMPONENTS = frozenset({"button", "input", "badge", "tag", "avatar"})


def extract_ui_components(req: Requirements) -> list[str]:
    """Components named in the requirements, then catalog widgets mentioned in the text."""
    text = " ".join([req.title, req.overview, *(f.name for f in req.features)])
    found = list(req.components)
    for name, pattern in _UI_COMPONENT_PATTERNS:
        if name not in found and pattern.search(text):
            found.append(name)
    return found


def estimate_component_hours(component: str) -> int:
    if component.lower() in COMPLEX_COMPONENTS:
        return 12
    if component.lower() in SIMPLE_COMPONENTS:
        return 4
    return 8


class FrontendViewpoint(Viewpoint):
    """User experience, accessibility and performance first."""

    name = "frontend"
    description = "User experience, accessibility and client-side performance"
    priority_hierarchy = ("User needs", "Accessibility", "Performance", "Technical elegance")

    BEST_PRACTICES = (
        "Implement mobile-first responsive design",
        "Ensure WCAG 2.1 AA accessibility compliance",
        "Optimize for Core Web Vitals performance metrics",
        "Use semantic HTML and proper ARIA labels",
        "Implement proper error boundaries and loading states",
        "Follow consistent naming conventions for CSS classes",
        "Optimize images and implement lazy loading",
        "Use progressive enhancement principles",
        "Test across multiple browsers and devices",
        "Implement proper focus management for keyboard users",
    )

    QUALITY_GATES = (
        "Design system consistency check",
        "Accessibility audit (WCAG 2.1 AA)",
        "Performance budget validation",
        "Cross-browser compatibility test",
        "Mobile responsiveness validation",
        "Code quality and ESLint compliance",
        "Bundle size optimization check",
        "User acceptance testing",
        "Visual regression testing",
    )

    def phase_builders(self):
        return (
            self.ux_analysis,
            self.design_system,
            self.component_architecture,
            self.implementation,
            self.accessibility,
            self.performance_optimization,
            self.cross_browser_testing,
        )

    def ux_analysis(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="UX Analysis & Planning",
            type="ux-design",
            duration="3-5 days",
            tasks=[
                task("analysis", "User journey mapping",
                     "Map all user flows and interaction patterns",
                     ["User journey maps", "Flow diagrams"], 8, ["Figma", "Miro"]),
                task("design", "Wireframe creation",
                     "Create low-fidelity wireframes for all interfaces",
                     ["Wireframe library", "Interaction specifications"], 12,
                     ["Figma", "Sketch"], dependencies=["User journey mapping"]),
                task("analysis", "Accessibility requirements analysis",
                     "Define accessibility requirements and compliance targets",
                     ["Accessibility checklist", "WCAG compliance plan"], 4),
                task("analysis", "Performance requirements definition",
                     "Set performance budgets and optimization targets",
                     ["Performance budget document", "Optimization strategy"], 3),
            ],
        )

    def design_system(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Design System Development",
            type="design-system",
            duration="5-8 days",
            tasks=[
                task("design", "Component library design",
                     "Design reusable UI components and patterns",
                     ["Component library", "Design tokens"], 16, ["Figma", "Storybook"],
                     priority="high"),
                task("design", "Typography and color system",
                     "Define typography scales, color palettes, and spacing",
                     ["Design tokens", "Style guide"], 6),
                task("design", "Responsive breakpoint strategy",
                     "Define responsive behavior and breakpoint system",
                     ["Responsive guidelines", "Grid system"], 4),
                task("implement", "CSS architecture setup",
                     "Implement CSS architecture and build system",
                     ["CSS framework", "Build configuration"], 8,
                     ["Sass", "PostCSS", "Tailwind"]),
            ],
        )

    def component_architecture(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        tasks = [
            task("design", "Component hierarchy design",
                 "Define component structure and relationships",
                 ["Component tree", "Props interface design"], 6, priority="high"),
            task("design", "State management architecture",
                 "Design client-side state management strategy",
                 ["State architecture", "Data flow diagrams"], 8,
                 ["Redux", "Context API", "Zustand"]),
            task("setup", "Development environment setup",
                 "Configure development tools and build pipeline",
                 ["Dev environment", "Build configuration"], 4,
                 ["Vite", "Webpack", "ESLint", "Prettier"]),
        ]
        for component in extract_ui_components(req)[: settings.max_component_tasks]:
            tasks.append(
                task("implement", f"Implement {component} component",
                     f"Create reusable {component} component with full functionality",
                     [f"{component} component", "Unit tests", "Storybook stories"],
                     estimate_component_hours(component),
                     dependencies=["Component hierarchy design"])
            )
        return Phase(
            name="Component Architecture", type="architecture", duration="3-5 days", tasks=tasks
        )

    def implementation(self, req: Requirements, settings: SynthesisConfig) -> list[Phase]:
        return feature_implementation_phases(req)

    def accessibility(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Accessibility Testing & Compliance",
            type="accessibility",
            duration="2-3 days",
            tasks=[
                task("test", "Automated accessibility testing",
                     "Run automated accessibility audits and fix issues",
                     ["Accessibility audit report", "Fixed violations"], 6,
                     ["axe-core", "Lighthouse", "WAVE"]),
                task("test", "Manual accessibility testing",
                     "Perform manual testing with screen readers and keyboard navigation",
                     ["Manual test results", "Accessibility improvements"], 8,
                     ["NVDA", "JAWS", "VoiceOver"]),
                task("test", "Color contrast validation",
                     "Validate color contrast ratios meet WCAG guidelines",
                     ["Contrast audit report", "Color adjustments"], 3,
                     ["Colour Contrast Analyser"]),
                task("implement", "ARIA implementation",
                     "Implement proper ARIA labels and semantic markup",
                     ["ARIA implementation", "Semantic HTML"], 5),
            ],
        )

    def performance_optimization(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Performance Optimization",
            type="performance",
            duration="3-4 days",
            tasks=[
                task("optimize", "Bundle size optimization",
                     "Optimize JavaScript bundles and implement code splitting",
                     ["Optimized bundles", "Code splitting strategy"], 8,
                     ["Webpack Bundle Analyzer", "source-map-explorer"]),
                task("optimize", "Image optimization",
                     "Optimize images and implement lazy loading",
                     ["Optimized images", "Lazy loading implementation"], 4,
                     ["ImageOptim", "Sharp", "react-lazyload"]),
                task("optimize", "CSS optimization",
                     "Optimize CSS delivery and remove unused styles",
                     ["Optimized CSS", "Critical CSS extraction"], 3,
                     ["PurgeCSS", "Critical"]),
                task("implement", "Performance monitoring setup",
                     "Implement performance monitoring and Core Web Vitals tracking",
                     ["Performance monitoring", "Metrics dashboard"], 4,
                     ["Google Analytics", "Sentry", "Web Vitals"]),
                task("test", "Performance testing",
                     "Conduct performance tests and validate against budgets",
                     ["Performance test results", "Optimization recommendations"], 3,
                     ["Lighthouse", "WebPageTest", "GTmetrix"]),
            ],
        )

    def cross_browser_testing(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Cross-Browser Testing",
            type="testing",
            duration="2-3 days",
            tasks=[
                task("test", "Browser compatibility testing",
                     "Test functionality across major browsers and versions",
                     ["Compatibility test results", "Browser-specific fixes"], 8,
                     ["BrowserStack", "Sauce Labs"]),
                task("test", "Mobile device testing",
                     "Test responsive behavior on various mobile devices",
                     ["Mobile test results", "Responsive fixes"], 6,
                     ["Chrome DevTools", "Real devices"]),
                task("test", "Feature detection and polyfills",
                     "Implement feature detection and necessary polyfills",
                     ["Polyfill strategy", "Feature detection code"], 4,
                     ["Modernizr", "core-js"]),
            ],
        )
