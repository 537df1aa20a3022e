"""
Migration Checklist

Markdown checklist of the manual work a Vercel to Netlify move involves.
"""

from datetime import date
from typing import Optional

CHECKLIST_FILE = "MIGRATION_CHECKLIST.md"

DEFAULT_FRAMEWORK = "Next.js"

NEXTJS_CODE_PREPARATION = """- [ ] Upgrade Next.js to version 13.5 or higher
- [ ] Verify `next/image` usage (compatible with Netlify Image CDN)
- [ ] Check for ISR (Incremental Static Regeneration) usage
- [ ] Review API routes (may need migration to Netlify Functions)
- [ ] Verify middleware compatibility"""

NEXTJS_ADJUSTMENTS = """- [ ] Update `next.config.js` if needed
- [ ] Configure headers in `next.config.js`
- [ ] Verify image optimization settings
- [ ] Test API routes or migrate to Netlify Functions
- [ ] Check middleware compatibility
- [ ] Verify Edge Runtime usage (may need adjustment)"""

NEXTJS_TESTING = """- [ ] Test SSR (Server-Side Rendering) pages
- [ ] Test SSG (Static Site Generation) pages
- [ ] Test ISR (Incremental Static Regeneration) if used
- [ ] Verify Image Optimization
- [ ] Test dynamic routes
- [ ] Verify internationalization (i18n) if used"""


def is_nextjs(framework: str) -> bool:
    return framework.strip().lower() in ("next.js", "nextjs", "next")


def render_checklist(framework: str = DEFAULT_FRAMEWORK, today: Optional[date] = None) -> str:
    """Render MIGRATION_CHECKLIST.md.

    Args:
        framework: Framework name shown in the checklist; Next.js adds
            framework-specific items
        today: Date stamped into the document (default: today)
    """
    framework = framework or DEFAULT_FRAMEWORK
    stamp = (today or date.today()).isoformat()
    nextjs = is_nextjs(framework)

    code_preparation = NEXTJS_CODE_PREPARATION if nextjs else \
        "- [ ] Review framework-specific requirements for Netlify"
    adjustments = NEXTJS_ADJUSTMENTS if nextjs else \
        "- [ ] Make framework-specific configuration changes"
    framework_testing = NEXTJS_TESTING if nextjs else \
        "- [ ] Test framework-specific features"
    plugin_item = "- [ ] Add `@netlify/plugin-nextjs` to the build\n" if nextjs else ""

    return f"""# Vercel to Netlify Migration Checklist

**Framework:** {framework}
**Generated:** {stamp}

## Pre-Migration Preparation

### Documentation & Audit
- [ ] Document current Vercel configuration
- [ ] List all custom domains and DNS configurations
- [ ] Review current deployment workflow
- [ ] Identify Vercel-specific features in use
- [ ] Audit current build times and performance metrics
- [ ] Export analytics and monitoring data

### Code Preparation
{code_preparation}
- [ ] Run local build to ensure everything works
- [ ] Update dependencies to latest stable versions

## Configuration Migration

### Files & Settings
- [ ] Convert `vercel.json` to `netlify.toml` (automated)
- [ ] Migrate redirects and rewrites
- [ ] Migrate headers configuration
- [ ] Review and update build commands
- [ ] Set correct publish directory
- [ ] Configure function directory (if using serverless functions)

### Environment Variables
- [ ] Export all environment variables from Vercel
- [ ] Review `.env.netlify` file (automated)
- [ ] Set variables in Netlify UI or via CLI
- [ ] Configure context-specific variables (production, preview, branch)
- [ ] Use Netlify Secrets Controller for sensitive data
- [ ] Verify framework-specific public variable prefixes
- [ ] Test that all environment variables are accessible

## Netlify Setup

### Account & Site Configuration
- [ ] Create Netlify account (if needed)
- [ ] Connect Git repository to Netlify
- [ ] Configure build settings in Netlify UI
- [ ] Set up team access and permissions

### Domain & DNS
- [ ] Add custom domain(s) in Netlify
- [ ] Configure DNS settings (Netlify nameservers or A/CNAME records)
- [ ] Enable HTTPS/SSL (automatic with Netlify)
- [ ] Configure www to apex redirect (or vice versa)

### Advanced Features
- [ ] Set up Deploy Previews for pull requests
- [ ] Configure branch deploys if needed
- [ ] Set up build hooks for automated deployments
- [ ] Configure analytics

## Code Changes

### Framework-Specific Adjustments
{adjustments}

### Serverless Functions
- [ ] Migrate Vercel Edge Functions to Netlify Functions
- [ ] Update function paths and imports
- [ ] Test function endpoints locally
- [ ] Verify function timeouts and limits
- [ ] Update client-side API calls if function URLs changed

### Dependencies
{plugin_item}- [ ] Install Netlify CLI: `npm install -g netlify-cli`
- [ ] Update package.json scripts if needed

## Testing

### Local Testing
- [ ] Log in: `netlify login`
- [ ] Link project: `netlify link`
- [ ] Test build locally: `netlify build`
- [ ] Test functions locally: `netlify dev`
- [ ] Test environment variables are loaded correctly

### Deploy Preview Testing
- [ ] Create deploy preview
- [ ] Test all pages and routes
- [ ] Verify redirects work correctly
- [ ] Verify API/function endpoints
- [ ] Check console for errors
- [ ] Test authentication flows (if applicable)
- [ ] Run performance audits (Lighthouse, WebPageTest)

### {framework} Specific Testing
{framework_testing}

## Go-Live Preparation

### Pre-Launch
- [ ] Complete all testing checklist items
- [ ] Prepare rollback plan
- [ ] Notify team of go-live timeline
- [ ] Set up monitoring and alerts

### DNS Cutover
- [ ] Lower DNS TTL 24-48 hours before migration
- [ ] Update DNS records to point to Netlify
- [ ] Monitor DNS propagation
- [ ] Verify site loads on new infrastructure
- [ ] Restore normal DNS TTL

### Post-Launch
- [ ] Monitor error rates and performance
- [ ] Verify all functions working correctly
- [ ] Monitor build success rate
- [ ] Update documentation with new deployment URLs

## Post-Migration

### Cleanup
- [ ] Update CI/CD pipeline if needed
- [ ] Remove Vercel-specific code/config
- [ ] Archive Vercel project (after confirmation)
- [ ] Delete old preview deployments in Vercel

## Resources

- [Netlify Documentation](https://docs.netlify.com/)
- [Netlify CLI Documentation](https://cli.netlify.com/)
- [Netlify Next.js Runtime](https://github.com/netlify/netlify-plugin-nextjs)
- [Vercel to Netlify Migration Guide](https://docs.netlify.com/resources/checklists/vercel-to-netlify-migration/)

## Notes

Add any migration-specific notes, issues, or decisions here:

---

**Migration Status:** In Progress
**Started:** {stamp}
**Target Go-Live:** [Set your target date]
"""
