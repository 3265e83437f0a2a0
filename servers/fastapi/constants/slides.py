# servers/fastapi/constants/slides.py

from enums.slide_layout import SlideLayout

# ------------------ Slide defaults ------------------ #

DEFAULT_SLIDE_TITLE = "Untitled Slide"
DEFAULT_SLIDE_CONTENT = ""
DEFAULT_SLIDE_LAYOUT = SlideLayout.CONTENT
DEFAULT_SLIDE_ORDER = 0

# ------------------ Default deck ------------------ #
# Seeded into an empty store; each slide's order is its position here.

DEFAULT_SLIDES = [
    {
        "title": "Markdown Slide Deck Application",
        "layout": SlideLayout.TITLE,
        "content": """# Markdown Slide Deck Application

## Architecture, Design & Development Journey

Built with React, Node.js, and SQLite

A comprehensive overview of our presentation application""",
    },
    {
        "title": "Application Architecture",
        "layout": SlideLayout.TWO_COLUMN,
        "content": """## Application Architecture

### Frontend Stack
- React 18 with TypeScript
- Tailwind CSS for styling
- Tanstack Query for data fetching
- Vite as build tool

### Backend Stack
- Node.js with Express.js
- SQLite database with Sequelize ORM
- RESTful API design
- CORS enabled for cross-origin requests""",
    },
    {
        "title": "System Components",
        "layout": SlideLayout.CONTENT,
        "content": """## Key System Components

### Core Components
- SlideDeck - Main presentation container
- SlideRenderer - Markdown to React rendering
- SlideEditor - Live markdown editor
- SlideNavigation - Presentation controls

### Services & Utilities
- slideService - API communication layer
- MarkdownParser - AST generation & layout detection
- apiService - HTTP request abstraction

### Database Layer
- Slide model with Sequelize
- UUID primary keys for scalability
- Timestamps for audit trails""",
    },
    {
        "title": "Data Flow Architecture",
        "layout": SlideLayout.CODE,
        "content": """## Data Flow Architecture

```mermaid
graph TD
    A[React Frontend] --> B[Tanstack Query]
    B --> C[slideService]
    C --> D[API Service]
    D --> E[Express Routes]
    E --> F[Slide Controller]
    F --> G[Sequelize ORM]
    G --> H[SQLite Database]
    
    I[Markdown Content] --> J[MarkdownParser]
    J --> K[AST Nodes]
    K --> L[SlideRenderer]
    L --> M[Rendered UI]
```""",
    },
    {
        "title": "Design Considerations",
        "layout": SlideLayout.CONTENT,
        "content": """## Key Design Decisions

### 1. Markdown-First Approach
- Why: Universal format, easy to learn
- Future: Export to other formats (PDF, PPTX)

### 2. Real-time Preview
- Why: Immediate feedback improves UX
- Implementation: Live parsing and rendering

### 3. Layout Auto-detection
- Why: Reduces manual configuration
- Algorithm: AST analysis for optimal layouts

### 4. RESTful API Design
- Why: Standard, scalable, cacheable
- Future: GraphQL for complex queries""",
    },
    {
        "title": "Database Design Choices",
        "layout": SlideLayout.CODE,
        "content": """## Database Architecture

### SQLite Selection
- Pros: Lightweight, serverless, perfect for demos
- Cons: Single-writer limitation
- Future: Easy migration to PostgreSQL

### Schema Design
```sql
CREATE TABLE Slides (
  id UUID PRIMARY KEY,
  title VARCHAR(255) NOT NULL,
  content TEXT NOT NULL,
  layout ENUM('title', 'content', 'two-column', 'code'),
  order INTEGER NOT NULL,
  createdAt TIMESTAMP,
  updatedAt TIMESTAMP
);
```""",
    },
    {
        "title": "State Management Strategy",
        "layout": SlideLayout.CONTENT,
        "content": """## State Management Approach

### Tanstack Query Benefits
- Server State: Automatic caching & synchronization
- Optimistic Updates: Better perceived performance
- Error Handling: Built-in retry mechanisms
- Background Refetching: Always fresh data

### Local State
- React useState: Component-level state
- No Redux: Avoided complexity for this scope
- Future: Consider Zustand for complex client state""",
    },
    {
        "title": "Key Technical Challenges",
        "layout": SlideLayout.CONTENT,
        "content": """## Development Challenges

### 1. Markdown Parsing Complexity
- Challenge: Converting markdown to structured AST
- Solution: Custom parser with layout detection
- Learning: Regex patterns for markdown syntax

### 2. Real-time Editor Performance
- Challenge: Re-parsing on every keystroke
- Solution: Debounced updates and memoization
- Future: Web Workers for heavy parsing

### 3. Slide Synchronization
- Challenge: Frontend-backend state consistency
- Solution: Tanstack Query invalidation strategy
- Learning: Optimistic updates vs data integrity""",
    },
    {
        "title": "Code Quality Decisions",
        "layout": SlideLayout.CONTENT,
        "content": """## Code Quality & Maintainability

### TypeScript Integration
- Full type safety across frontend and API interfaces
- Interface definitions for all data structures
- Generic API service for reusable HTTP operations

### Component Architecture
- Single Responsibility - focused components
- Composition over inheritance - flexible layouts
- Props drilling avoided - service layer abstraction

### Error Handling Strategy
- Graceful degradation - fallback to empty states
- User-friendly messages - no technical jargon
- Comprehensive logging - debugging and monitoring""",
    },
    {
        "title": "Performance Optimizations",
        "layout": SlideLayout.TWO_COLUMN,
        "content": """## Performance Considerations

### Frontend Optimizations
- React.memo for expensive renders
- useCallback for stable function references
- Lazy loading for large presentations
- Virtualization planned for 100+ slides

### Backend Optimizations
- Database indexing on order and id fields
- Connection pooling for concurrent requests
- Response compression for large content
- Caching headers for static assets""",
    },
    {
        "title": "Security & Scalability",
        "layout": SlideLayout.CONTENT,
        "content": """## Security & Future Scale

### Current Security Measures
- Input sanitization for markdown content
- CORS configuration for cross-origin safety
- Helmet.js for security headers
- Request size limits to prevent abuse

### Scalability Considerations
- Stateless API design for horizontal scaling
- Database abstraction for easy migration
- Modular frontend for code splitting
- CDN-ready static asset organization""",
    },
    {
        "title": "Future Roadmap",
        "layout": SlideLayout.CONTENT,
        "content": """## Planned Enhancements

### Short-term Features
- Slide templates for quick start
- Image upload and media management
- Export functionality (PDF, images)
- Presentation sharing via public links

### Long-term Vision
- Collaborative editing with real-time sync
- Plugin system for custom components
- Analytics dashboard for presentation insights
- Mobile app for remote presentation control""",
    },
    {
        "title": "Key Takeaways",
        "layout": SlideLayout.CONTENT,
        "content": """## Development Insights

### Technical Learnings
- Markdown parsing is more complex than expected
- Real-time updates require careful state management
- TypeScript significantly improves development speed
- Component composition scales better than inheritance

### Process Insights
- Start simple - SQLite before PostgreSQL
- User feedback early - live preview was crucial
- Performance later - functionality first approach
- Documentation - self-documenting code wins

### Architecture Wins
- Service layer abstraction enabled easy testing
- Type safety caught bugs before runtime
- Modular design made refactoring painless""",
    },
    {
        "title": "Thank You!",
        "layout": SlideLayout.TITLE,
        "content": """# Questions & Discussion

## This presentation was created using our own application! 

### Key Stats
- 14 slides generated from markdown
- Auto-detected layouts for optimal presentation
- Real-time editing capabilities demonstrated
- Full-stack solution from database to UI

Demonstrating the power of markdown-driven presentations ✨""",
    },
]
